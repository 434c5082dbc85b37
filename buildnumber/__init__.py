"""
Copyright 2026 Adobe
All Rights Reserved.

NOTICE: Adobe permits you to use, modify, and distribute this file in accordance
with the terms of the Adobe license agreement accompanying it.
"""

import importlib.machinery
import logging
import os
import types
from typing import NamedTuple

from buildnumber.config import Configuration
from buildnumber.counter import resolve_build_number
from buildnumber.emitter import emit
from buildnumber.errors import (
    BuildNumberConfigurationError,
    BuildNumberEmissionError,
    BuildNumberError,
    BuildNumberHelpRequested,
    BuildNumberPersistenceError,
    BuildNumberUsageError,
)
from buildnumber.formats import select_output


LOGGER = logging.getLogger(__name__)

__version__ = "DEVELOPMENT"
try:
    _VERSION_FILE = os.path.join(os.path.dirname(__file__), "version.py")
    if os.path.exists(_VERSION_FILE):
        loader = importlib.machinery.SourceFileLoader(
            "buildnumberversion", _VERSION_FILE
        )
        _VERSION_MOD = types.ModuleType(loader.name)
        loader.exec_module(_VERSION_MOD)
        __version__ = getattr(_VERSION_MOD, "__version__", __version__)
except Exception:  # pylint: disable=broad-except
    pass


class GenerationResult(NamedTuple):
    build_number: int
    path: str


class BuildNumberGenerator:
    """
    Class used to resolve the build number and generate the source file for one invocation.
    """

    def __init__(self, config: Configuration):
        self.config = config

    def _check_output_path(self) -> None:
        output_path = self.config.output_path
        if not output_path:
            raise BuildNumberConfigurationError("No output path was specified")
        if not os.path.isdir(output_path):
            raise BuildNumberConfigurationError(
                f"The output path {output_path} does not exist or is not a directory"
            )

    def run(self) -> GenerationResult:
        """
        Run the generation: check the output path, select the output type, resolve the
        build number and write the source file. The output type is checked before the
        counter is touched so that an invalid type never modifies any file.
        """
        self._check_output_path()
        output_spec = select_output(self.config.requested_type)
        LOGGER.debug(
            f"Generating {output_spec.file_name} ({output_spec.dialect.token}) in {self.config.output_path}"
        )

        build_number = resolve_build_number(
            self.config.output_path, self.config.explicit_start
        )
        LOGGER.debug(f"Resolved build number {build_number}")

        path = emit(build_number, output_spec, self.config.output_path)
        return GenerationResult(build_number, path)


__all__ = [
    "__version__",
    "BuildNumberConfigurationError",
    "BuildNumberEmissionError",
    "BuildNumberError",
    "BuildNumberGenerator",
    "BuildNumberHelpRequested",
    "BuildNumberPersistenceError",
    "BuildNumberUsageError",
    "Configuration",
    "GenerationResult",
]
