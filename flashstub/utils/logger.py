#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Logging setup with colored console output.

The library itself only creates module loggers, a flashing tool embedding the package
calls :func:`install_logger` to see its messages.
"""

import logging
import logging.handlers
import os
import platform
import re
import sys
from datetime import datetime
from typing import Optional, TextIO

import colorama

from flashstub import (
    FLASHSTUB_DEBUG,
    FLASHSTUB_DEBUG_LOG_FILE,
    FLASHSTUB_DEBUG_LOGGING_DISABLED,
    __version__,
)

colorama.just_fix_windows_console()


class ColoredFormatter(logging.Formatter):
    """Logging formatter with colored output per log level.

    :cvar COLORED_FORMATS: Color-coded format strings for each logging level.
    :cvar FORMATS: Plain text format strings for each logging level.
    """

    FORMAT = logging.BASIC_FORMAT
    FORMAT_DEBUG = FORMAT + " (%(relativeCreated)dms since start, %(filename)s:%(lineno)d)"

    COLORED_FORMATS = {
        logging.DEBUG: colorama.Fore.BLUE + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.INFO: colorama.Fore.WHITE
        + colorama.Style.BRIGHT
        + FORMAT
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
        logging.WARNING: colorama.Fore.YELLOW + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.ERROR: colorama.Fore.RED + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.CRITICAL: colorama.Fore.RED
        + colorama.Style.BRIGHT
        + FORMAT_DEBUG
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
    }
    FORMATS = {
        logging.DEBUG: FORMAT_DEBUG,
        logging.INFO: FORMAT,
        logging.WARNING: FORMAT_DEBUG,
        logging.ERROR: FORMAT_DEBUG,
        logging.CRITICAL: FORMAT_DEBUG,
    }

    def __init__(self, colored: bool = True) -> None:
        """Overloaded init method to add colored parameter."""
        super().__init__()
        self.colored = colored
        self.formats = self.COLORED_FORMATS if colored else self.FORMATS

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with format string of its level.

        :param record: Input logging record to print.
        :return: Formatted logging string.
        """
        formatter = logging.Formatter(self.formats.get(record.levelno))
        if not self.colored and isinstance(record.msg, str):
            record.msg = re.sub(r"\x1b\[\d{1,3}m", "", record.msg)
        return formatter.format(record)


def _add_debug_file_handler(target_logger: logging.Logger, log_file: str) -> None:
    """Attach rotating debug log file handler, once per file.

    :param target_logger: Logger to extend.
    :param log_file: Path of the debug log.
    """
    for handler in target_logger.handlers:
        if (
            isinstance(handler, logging.handlers.RotatingFileHandler)
            and handler.baseFilename == os.path.abspath(log_file)
        ):
            return
    os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
    debug_handler = logging.handlers.RotatingFileHandler(
        log_file, mode="a", maxBytes=1_000_000, backupCount=5, encoding="utf-8"
    )
    debug_handler.setFormatter(ColoredFormatter(colored=False))
    debug_handler.setLevel(logging.DEBUG)
    target_logger.addHandler(debug_handler)

    starter = f"* FLASHSTUB DEBUG LOGGING STARTED {datetime.now().strftime('%Y-%m-%d %H:%M:%S')} *"
    padding = len(starter) - 2
    target_logger.debug("*" * len(starter))
    target_logger.debug(starter)
    target_logger.debug(f"* flashstub version: {__version__}".ljust(padding) + " *")
    target_logger.debug(f"* Python version: {sys.version.split()[0]}".ljust(padding) + " *")
    target_logger.debug(f"* OS version: {platform.platform()}".ljust(padding) + " *")
    target_logger.debug("*" * len(starter))


def install_logger(
    level: Optional[int] = None,
    stream: TextIO = sys.stderr,
    colored: Optional[bool] = None,
    logger: Optional[logging.Logger] = None,
    create_debug_logger: bool = True,
    debug_log_file: Optional[str] = None,
) -> logging.Logger:
    """Install log handler of the flashstub loggers.

    :param level: Console logging level, defaults to DEBUG with FLASHSTUB_DEBUG, WARNING otherwise
    :param stream: Stream to output logging, defaults to sys.stderr
    :param colored: Colored output, detected from the stream when not specified
    :param logger: Logger to configure, defaults to 'flashstub' logger
    :param create_debug_logger: Create rotating debug log file
    :param debug_log_file: Debug log path, defaults to FLASHSTUB_DEBUG_LOG_FILE
    :return: Configured logger.
    """
    if not level:
        level = logging.DEBUG if FLASHSTUB_DEBUG else logging.WARNING

    target_logger = logger or logging.getLogger("flashstub")
    target_logger.setLevel(logging.DEBUG)

    color = True
    if "NO_COLOR" in os.environ:
        # For details see https://no-color.org/
        color = False
    if not hasattr(stream, "isatty") or not stream.isatty():
        color = False
    if colored is not None:
        color = colored

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(color))
    target_logger.addHandler(handler)

    if create_debug_logger and not FLASHSTUB_DEBUG_LOGGING_DISABLED:
        log_file = debug_log_file or FLASHSTUB_DEBUG_LOG_FILE
        try:
            _add_debug_file_handler(target_logger, log_file)
        except OSError as exc:
            target_logger.warning(f"Failed to initialize debug logging: {str(exc)}")
    return target_logger
