"""
Copyright 2026 Adobe
All Rights Reserved.

NOTICE: Adobe permits you to use, modify, and distribute this file in accordance
with the terms of the Adobe license agreement accompanying it.
"""

from enum import Enum
from typing import NamedTuple, Optional

from buildnumber.errors import BuildNumberConfigurationError


BUILD_FILE_PREFIX = "build_no."


class OutputDialect(Enum):
    """
    Source languages the build number can be rendered into.
    """

    C = ("C", "h")
    CPLUSPLUS = ("C++", "hpp")
    CSHARP = ("C#", "cs")

    def __init__(self, token: str, extension: str):
        self.token = token
        self.extension = extension

    @property
    def file_name(self) -> str:
        return f"{BUILD_FILE_PREFIX}{self.extension}"

    @property
    def template_name(self) -> str:
        return f"{self.file_name}.j2"

    @classmethod
    def from_token(cls, token: Optional[str]) -> Optional["OutputDialect"]:
        """Return the dialect for a command line type token (case-sensitive)."""
        for dialect in cls:
            if dialect.token == token:
                return dialect
        return None


class OutputSpec(NamedTuple):
    dialect: OutputDialect
    file_name: str


def supported_tokens() -> str:
    return ", ".join(dialect.token for dialect in OutputDialect)


def select_output(requested_type: Optional[str]) -> OutputSpec:
    """
    Map the requested output type to the dialect and the generated file name.

    :param requested_type: the type token given on the command line
    :return: the output spec
    :raises BuildNumberConfigurationError: when the type is missing or unsupported
    """
    dialect = OutputDialect.from_token(requested_type)
    if dialect is None:
        raise BuildNumberConfigurationError(
            f"Unsupported output type {requested_type!r}, must be one of: {supported_tokens()}"
        )
    return OutputSpec(dialect, dialect.file_name)
