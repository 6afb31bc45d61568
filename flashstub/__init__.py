#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Flash Stub Catalog & Loader.

Supplies, for a given target chip, the small RAM loader ("flasher stub") that has to be
uploaded into the device before the fast flashing protocol can be used.

WHAT YOU GET:
    - Closed catalog of stub resources embedded in the package, one per supported chip
    - Immutable stub descriptors with on-demand segment decoding
    - Transport independent load plan for the serial protocol layer

The behavior settings below are read once from environment variables on import.
"""

import os
import sys
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs


class FlashStubPlatformDirs(PlatformDirs):
    """Flash stub platform directories manager.

    Keeps the log directory layout identical on all operating systems.
    """

    @property
    def user_log_dir(self) -> str:
        """Get log directory tied to the user.

        On Windows platforms, returns a subdirectory 'Logs' within the user data directory.
        On non-Windows platforms, delegates to the parent class implementation.

        :return: Absolute path to the user log directory.
        """
        if sys.platform != "win32":
            return super().user_log_dir
        return os.path.join(self.user_data_dir, "Logs")


def get_flashstub_version() -> Version:
    """Get version of the flashstub package.

    :return: Parsed version object.
    """
    from .__version__ import __version__ as flashstub_version

    return parse(flashstub_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_flashstub_version()

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)

FLASHSTUB_VERSION_BASE = version.base_version

# FLASHSTUB_DATA_FOLDER might be redefined by FLASHSTUB_DATA_FOLDER env variable
FLASHSTUB_DATA_FOLDER = os.environ.get("FLASHSTUB_DATA_FOLDER") or os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "data"
)
FLASHSTUB_PLATFORM_DIRS = FlashStubPlatformDirs(
    appauthor="nxp", appname="flashstub", version=FLASHSTUB_VERSION_BASE
)

FLASHSTUB_DEBUG = value_to_bool(os.environ.get("FLASHSTUB_DEBUG"))
# unknown fields in stub resources are errors instead of warnings
FLASHSTUB_SCHEMA_STRICT = value_to_bool(os.environ.get("FLASHSTUB_SCHEMA_STRICT"))

FLASHSTUB_DEBUG_LOGGING_DISABLED = value_to_bool(
    os.environ.get("FLASHSTUB_DEBUG_LOGGING_DISABLED")
)
FLASHSTUB_DEBUG_LOG_FILE = os.environ.get(
    "FLASHSTUB_DEBUG_LOG_FILE", os.path.join(FLASHSTUB_PLATFORM_DIRS.user_log_dir, "debug.log")
)

# pylint: disable=wrong-import-position
from flashstub.catalog import get_stub  # noqa: E402
from flashstub.chips import Chip  # noqa: E402
from flashstub.stub import FlashStub  # noqa: E402

__all__ = ["Chip", "FlashStub", "get_stub", "__version__"]
