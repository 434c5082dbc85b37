"""
Copyright 2026 Adobe
All Rights Reserved.

NOTICE: Adobe permits you to use, modify, and distribute this file in accordance
with the terms of the Adobe license agreement accompanying it.
"""

import logging
import os
from typing import Optional

from buildnumber.errors import BuildNumberPersistenceError


COUNTER_FILE_NAME = "build_no.dat"
START_BUILD_NUMBER = 1
MAX_BUILD_NUMBER = 99999
# Largest value accepted when parsing, anything above is treated as unparsable
MAX_PARSED_VALUE = 2**32 - 1

LOGGER = logging.getLogger(__name__)


def parse_counter(text: Optional[str]) -> Optional[int]:
    """
    Parse an unsigned 32-bit decimal value, surrounding whitespace is ignored.

    :param text: the text to parse
    :return: the parsed value or None if the text is not a valid value
    """
    if text is None:
        return None
    text = text.strip()
    if text.startswith("+"):
        text = text[1:]
    if not text.isascii() or not text.isdigit():
        return None
    value = int(text)
    if value > MAX_PARSED_VALUE:
        return None
    return value


def bound_build_number(value: int) -> int:
    """
    Wrap values outside of the supported build number range back to the start value.
    """
    if value > MAX_BUILD_NUMBER or value == 0:
        return START_BUILD_NUMBER
    return value


class CounterStore:
    """
    Persisted build counter stored as a single line inside the output directory.

    There is no locking, concurrent invocations against the same directory race
    on the read-modify-write of the counter file.
    """

    def __init__(self, output_path: str):
        self.output_path = output_path
        self.path = os.path.join(output_path, COUNTER_FILE_NAME)

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def read(self) -> str:
        """
        Read the stripped contents of the counter file.
        """
        try:
            with open(self.path, "r", encoding="utf-8-sig", errors="replace") as fobj:
                return fobj.read().strip()
        except OSError as exc:
            raise BuildNumberPersistenceError(
                f"Error reading the counter file {self.path}: {exc}"
            ) from exc

    def write(self, value: int) -> None:
        """
        Overwrite the counter file with the given value.
        """
        try:
            with open(self.path, "w", encoding="utf8") as fobj:
                fobj.write(f"{value}\n")
        except OSError as exc:
            raise BuildNumberPersistenceError(
                f"Error writing the counter file {self.path}: {exc}"
            ) from exc

    def next_value(self) -> int:
        """
        Increment the persisted counter and return the new value.

        A missing counter file starts the count at the start value, an unparsable one
        is reset to it. The new value is written back before being returned.
        """
        if self.exists():
            contents = self.read()
            current = parse_counter(contents)
            if current is None:
                LOGGER.warning(
                    f"Invalid value {contents!r} in {self.path}, "
                    f"resetting the build number to {START_BUILD_NUMBER}"
                )
                value = START_BUILD_NUMBER
            else:
                value = current + 1
        else:
            LOGGER.debug(
                f"{self.path} does not exist, starting at build number {START_BUILD_NUMBER}"
            )
            value = START_BUILD_NUMBER

        value = bound_build_number(value)
        self.write(value)
        return value


def resolve_build_number(output_path: str, explicit_start: Optional[int] = None) -> int:
    """
    Determine the build number for this invocation.

    An explicit start value bypasses the counter file entirely: it is neither read
    nor updated.

    :param output_path: the existing directory holding the counter file
    :param explicit_start: an optional value overriding the persisted counter
    :return: the build number, always within [START_BUILD_NUMBER, MAX_BUILD_NUMBER]
    """
    if explicit_start is not None:
        value = bound_build_number(explicit_start)
        if value != explicit_start:
            LOGGER.warning(
                f"Start build number {explicit_start} is out of range, using {value}"
            )
        return value
    return CounterStore(output_path).next_value()
