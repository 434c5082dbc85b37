"""
Copyright 2026 Adobe
All Rights Reserved.

NOTICE: Adobe permits you to use, modify, and distribute this file in accordance
with the terms of the Adobe license agreement accompanying it.
"""

import logging
import os

import jinja2

from buildnumber.errors import BuildNumberEmissionError
from buildnumber.formats import OutputDialect, OutputSpec


TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")

LOGGER = logging.getLogger(__name__)

_ENVIRONMENT = jinja2.Environment(
    loader=jinja2.FileSystemLoader(TEMPLATES_DIR),
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
    autoescape=False,
)


def render(build_number: int, dialect: OutputDialect) -> str:
    """
    Render the build number source file contents for the given dialect.
    """
    template = _ENVIRONMENT.get_template(dialect.template_name)
    return template.render(
        build_number=build_number,
        file_name=dialect.file_name,
    )


def emit(build_number: int, output_spec: OutputSpec, output_path: str) -> str:
    """
    Write the build number source file, replacing any previously generated one.

    :param build_number: the resolved build number
    :param output_spec: the dialect and file name to generate
    :param output_path: the directory receiving the file
    :return: the path of the generated file
    """
    contents = render(build_number, output_spec.dialect)
    out_file = os.path.join(output_path, output_spec.file_name)
    try:
        if os.path.lexists(out_file):
            LOGGER.debug(f"Removing previously generated file {out_file}")
            os.remove(out_file)
        with open(out_file, "w", encoding="utf8") as fobj:
            fobj.write(contents)
    except OSError as exc:
        raise BuildNumberEmissionError(
            f"Error generating the file {out_file}: {exc}"
        ) from exc
    return out_file
