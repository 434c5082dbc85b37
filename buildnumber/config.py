"""
Copyright 2026 Adobe
All Rights Reserved.

NOTICE: Adobe permits you to use, modify, and distribute this file in accordance
with the terms of the Adobe license agreement accompanying it.
"""

from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from buildnumber.errors import BuildNumberUsageError


class Configuration(BaseModel, extra="forbid", frozen=True):
    """
    The settings for a single invocation, created once from the command line.
    """

    output_path: str = ""
    requested_type: Optional[str] = None
    explicit_start: Optional[int] = Field(None, ge=0)

    @field_validator("output_path")
    @classmethod
    def strip_output_path(cls, value: str) -> str:
        return value.strip()


def _format_validation_errors(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        loc = ".".join(str(item) for item in error["loc"])
        messages.append(f"  {loc}:  {error['msg']} ({error['type']})")
    return "\n".join(messages)


def generate_configuration(**kwargs) -> Configuration:
    """
    Build the configuration, reporting invalid values as a usage error.
    """
    try:
        return Configuration(**kwargs)
    except ValidationError as exc:
        raise BuildNumberUsageError(
            f"Invalid arguments:\n{_format_validation_errors(exc)}"
        ) from exc
