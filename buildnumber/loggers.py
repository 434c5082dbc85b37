"""
Copyright 2026 Adobe
All Rights Reserved.

NOTICE: Adobe permits you to use, modify, and distribute this file in accordance
with the terms of the Adobe license agreement accompanying it.
"""

import logging
import sys
from typing import Optional

import colorlog


RESULT_LOGGER_NAME = "buildnumber.result"
RESULT_COLOR = "green"
LOG_FORMAT = "%(log_color)s%(levelname)-8s %(message)s"
DEFAULT_LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "white",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red",
}


class CustomColoredFormatter(colorlog.ColoredFormatter):
    def __init__(self, fmt: str, no_color: bool, color: Optional[str] = None):
        super().__init__(
            fmt, no_color=no_color, log_colors=self._get_log_level_colors(color)
        )
        self.fmt = fmt
        self.color = color

    def clone(
        self, color: Optional[str] = None, no_color: Optional[bool] = None
    ) -> "CustomColoredFormatter":
        if color is None:
            color = self.color
        if no_color is None:
            no_color = self.no_color
        return CustomColoredFormatter(self.fmt, no_color, color)

    @staticmethod
    def _get_log_level_colors(color: Optional[str]) -> dict:
        """
        Use the default per-level colors unless a single color is forced for every level.
        """
        if color is None:
            return dict(DEFAULT_LOG_COLORS)
        return {level: color for level in DEFAULT_LOG_COLORS}


def initialize_root_logger(debug: bool, no_log_color: bool) -> None:
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(CustomColoredFormatter(LOG_FORMAT, no_log_color))
    logger.handlers.clear()
    logger.addHandler(console_handler)

    _initialize_result_logger(console_handler)


def _initialize_result_logger(console_handler: logging.StreamHandler) -> None:
    """
    Copy the console handler of the root logger onto the result logger, forcing the
    success color for every message written through it.
    :param console_handler: the root console handler
    """
    logger = logging.getLogger(RESULT_LOGGER_NAME)
    logger.propagate = False
    logger.handlers.clear()

    result_handler = logging.StreamHandler(console_handler.stream)
    result_handler.setFormatter(console_handler.formatter.clone(RESULT_COLOR))
    logger.addHandler(result_handler)


def get_result_logger() -> logging.Logger:
    return logging.getLogger(RESULT_LOGGER_NAME)
