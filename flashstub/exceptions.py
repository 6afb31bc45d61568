#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Flash stub exception classes.

Every error raised by this package stems from a defect in the embedded stub resources
or from a caller asking for an unsupported chip. None of them is recoverable at runtime,
the flashing tool is expected to abort with the reported diagnostic.
"""

from typing import Optional

#######################################################################
# # Flash Stub Exceptions
#######################################################################


class FlashStubError(Exception):
    """Flash Stub Base Exception.

    Base exception class for all flashstub errors.

    :cvar fmt: Default error message format template.
    """

    fmt = "FLASHSTUB: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base flash stub exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message as string.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class FlashStubKeyError(FlashStubError, KeyError):
    """Flash stub key error exception for missing or invalid keys."""


class FlashStubValueError(FlashStubError, ValueError):
    """Flash stub standard value error exception."""


class FlashStubTypeError(FlashStubError, TypeError):
    """Flash stub standard type error exception."""


class FlashStubUnknownVariant(FlashStubKeyError):
    """Requested chip has no entry in the stub catalog.

    The chip enumeration and the catalog are closed and exhaustive, so this only happens
    when a caller passes something that is not a supported chip.
    """


class FlashStubMalformedResource(FlashStubError):
    """Stub resource text fails structural parsing.

    Raised when the container is not well-formed JSON, a required field is missing,
    a field has the wrong type or an address does not fit into 32-bit unsigned integer.
    """


class FlashStubEncodingError(FlashStubValueError):
    """Stub payload field is not valid standard padded base64."""


class FlashStubOverlapError(FlashStubValueError):
    """Text and data segments of a stub occupy intersecting address ranges."""


class FlashStubCatalogError(FlashStubError):
    """Stub catalog does not cover exactly the supported chips.

    Raised while the catalog module is imported, the package can't be used at all.
    """
