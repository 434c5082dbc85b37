"""
Copyright 2026 Adobe
All Rights Reserved.

NOTICE: Adobe permits you to use, modify, and distribute this file in accordance
with the terms of the Adobe license agreement accompanying it.
"""

import argparse
import logging
import os
import platform
import sys
from typing import Optional

from . import (
    __version__,
    BuildNumberConfigurationError,
    BuildNumberEmissionError,
    BuildNumberGenerator,
    BuildNumberHelpRequested,
    BuildNumberPersistenceError,
    BuildNumberUsageError,
)
from buildnumber import loggers
from buildnumber.config import Configuration, generate_configuration
from buildnumber.counter import parse_counter
from buildnumber.formats import supported_tokens


LOGGER = logging.getLogger(__name__)

# Options always taking the next token as their value
VALUE_OPTIONS = ("-p", "-t", "-s")

EXAMPLES = """How to use
       buildnumber -t C++ -p C:\\myproject
       ./buildnumber -t C++ -p /home/username/myproject
"""


class _ArgumentParser(argparse.ArgumentParser):
    """
    Argument parser reporting errors as exceptions so the caller decides how to exit.
    """

    def error(self, message):
        raise BuildNumberUsageError(message)


class _HelpAction(argparse.Action):
    """
    Stops the parsing as soon as the help option is seen.
    """

    def __init__(
        self,
        option_strings,
        dest=argparse.SUPPRESS,
        default=argparse.SUPPRESS,
        help=None,  # pylint: disable=redefined-builtin
    ):
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            default=default,
            nargs=0,
            help=help,
        )

    def __call__(self, parser, namespace, values, option_string=None):
        raise BuildNumberHelpRequested("help requested")


def _strip(value: str) -> str:
    return value.strip()


def _attach_option_values(args):
    """
    Glue a dash-leading value to its option (`-p -build` becomes `-p-build`) so
    argparse takes it as the value instead of another option.
    """
    attached = []
    index = 0
    while index < len(args):
        token = args[index]
        if (
            token in VALUE_OPTIONS
            and index + 1 < len(args)
            and args[index + 1].startswith("-")
        ):
            attached.append(f"{token}{args[index + 1]}")
            index += 2
        else:
            attached.append(token)
            index += 1
    return attached


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=os.path.basename(prog) if prog else "buildnumber",
        description="buildnumber increments the build counter of a project and "
        "generates a source file holding it",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )

    parser.add_argument(
        "-t",
        dest="requested_type",
        default=None,
        type=_strip,
        metavar="TYPE",
        help=f"build file type: {supported_tokens()}",
    )

    parser.add_argument(
        "-p",
        dest="output_path",
        default="",
        type=_strip,
        metavar="PATH",
        help="output path, an existing directory holding the counter and the generated file",
    )

    parser.add_argument(
        "-s",
        dest="start",
        default=None,
        type=_strip,
        metavar="NUMBER",
        help="start build number eg. 100 (optional, the counter file is not updated)",
    )

    parser.add_argument(
        "-h",
        action=_HelpAction,
        help="this help",
    )

    parser.add_argument(
        "-x",
        "--debug",
        dest="debug",
        default=False,
        action="store_true",
        help="enables debug logging",
    )

    parser.add_argument(
        "--no-color",
        dest="no_log_color",
        default=False,
        action="store_true",
        help="disable colors when logging",
    )

    parser.add_argument(
        "--version",
        dest="print_version",
        default=False,
        action="store_true",
        help="print the current buildnumber version and exit",
    )

    return parser


def parse_cli_args(argv, parser: Optional[argparse.ArgumentParser] = None):
    """
    Parse command line arguments, argv[0] being the program name.

    :raises BuildNumberHelpRequested: when -h is given or there are no arguments
    :raises BuildNumberUsageError: when the arguments cannot be parsed
    """
    if parser is None:
        parser = build_parser(argv[0] if argv else None)
    if len(argv) < 2:
        raise BuildNumberHelpRequested("no arguments given")
    return parser.parse_args(_attach_option_values(argv[1:]))


def configuration_from_args(args: argparse.Namespace) -> Configuration:
    explicit_start = None
    if args.start is not None:
        explicit_start = parse_counter(args.start)
        if explicit_start is None:
            LOGGER.warning(
                f"Ignoring invalid start build number {args.start!r}, using the counter file"
            )
    return generate_configuration(
        output_path=args.output_path,
        requested_type=args.requested_type,
        explicit_start=explicit_start,
    )


def parse_args(argv) -> Configuration:
    """Parse command line arguments into the invocation configuration."""
    return configuration_from_args(parse_cli_args(argv))


def _print_banner() -> None:
    LOGGER.info(f"Build Number Utility - Version: {__version__}")
    LOGGER.debug(f"Running on: {platform.system()}")


def main(argv):
    """Main program execution."""
    parser = build_parser(argv[0] if argv else None)
    try:
        args = parse_cli_args(argv, parser)
    except BuildNumberHelpRequested:
        parser.print_help()
        return os.EX_USAGE
    except BuildNumberUsageError as exc:
        sys.stderr.write(f"ERROR: {exc}\n")
        parser.print_help()
        return os.EX_USAGE

    # are we just printing the version?
    if args.print_version:
        print(__version__)
        return os.EX_OK

    loggers.initialize_root_logger(args.debug, args.no_log_color)
    _print_banner()

    try:
        config = configuration_from_args(args)
    except BuildNumberUsageError as exc:
        LOGGER.error(str(exc))
        parser.print_help()
        return os.EX_USAGE

    try:
        result = BuildNumberGenerator(config).run()
    except BuildNumberConfigurationError as exc:
        LOGGER.error(str(exc))
        return os.EX_CONFIG
    except BuildNumberPersistenceError as exc:
        LOGGER.error(str(exc))
        return os.EX_IOERR
    except BuildNumberEmissionError as exc:
        LOGGER.error(str(exc))
        return os.EX_CANTCREAT

    loggers.get_result_logger().info(
        f"File '{os.path.basename(result.path)}' successfully generated "
        f"with new build number {result.build_number}."
    )
    return os.EX_OK


if __name__ == "__main__":
    sys.exit(main(sys.argv))
