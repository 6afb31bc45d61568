#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Catalog of flash stubs shipped with the package.

All stub resources are read once when this module is imported and kept in a read-only
mapping for the lifetime of the process; lookups never touch the file system. Import
fails with FlashStubCatalogError when the catalog does not cover every supported chip.
"""

import logging
import os
from types import MappingProxyType
from typing import Mapping, Union

from flashstub import FLASHSTUB_DATA_FOLDER
from flashstub.chips import Chip
from flashstub.exceptions import FlashStubCatalogError, FlashStubKeyError, FlashStubUnknownVariant
from flashstub.stub import FlashStub

logger = logging.getLogger(__name__)

STUBS_FOLDER = os.path.join(FLASHSTUB_DATA_FOLDER, "stubs")

STUB_RESOURCES: dict[Chip, str] = {
    Chip.ESP32: "esp32.json",
    Chip.ESP32C2: "esp32c2.json",
    Chip.ESP32C3: "esp32c3.json",
    Chip.ESP32C6: "esp32c6.json",
    Chip.ESP32H2: "esp32h2.json",
    Chip.ESP32S2: "esp32s2.json",
    Chip.ESP32S3: "esp32s3.json",
}


def _load_catalog(resources: Mapping[Chip, str], folder: str) -> Mapping[Chip, str]:
    """Read all stub resources into memory.

    :param resources: Chip to resource file name table.
    :param folder: Folder with the resource files.
    :raises FlashStubCatalogError: Table is not exhaustive or a resource can't be read.
    :return: Read-only mapping of chip to resource text.
    """
    missing = [chip.label for chip in Chip if chip not in resources]
    if missing:
        raise FlashStubCatalogError(f"No stub resource defined for: {', '.join(missing)}")
    if len(set(resources.values())) != len(resources):
        raise FlashStubCatalogError("Stub resource file is shared by more than one chip")

    texts: dict[Chip, str] = {}
    for chip, file_name in resources.items():
        path = os.path.join(folder, file_name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                texts[chip] = f.read()
        except OSError as exc:
            raise FlashStubCatalogError(
                f"Can't read stub resource for {chip.description}: {str(exc)}"
            ) from exc
    logger.debug(f"Loaded {len(texts)} stub resources from {folder}")
    return MappingProxyType(texts)


_CATALOG = _load_catalog(STUB_RESOURCES, STUBS_FOLDER)


def resolve_chip(chip: Union[Chip, str, int]) -> Chip:
    """Get chip enumeration member.

    :param chip: Chip member, chip name (case-insensitive) or chip id.
    :raises FlashStubUnknownVariant: The chip is not supported.
    :return: Chip member.
    """
    if isinstance(chip, Chip):
        return chip
    if isinstance(chip, (str, int)) and not isinstance(chip, bool):
        try:
            return Chip.from_attr(chip)
        except FlashStubKeyError as exc:
            raise FlashStubUnknownVariant(f"Unsupported chip: {chip}") from exc
    raise FlashStubUnknownVariant(f"Unsupported chip: {chip!r}")


def get_stub_resource(chip: Union[Chip, str, int]) -> str:
    """Get serialized stub resource of the chip.

    :param chip: Chip member, chip name or chip id.
    :raises FlashStubUnknownVariant: The chip is not supported.
    :return: Resource text (JSON).
    """
    chip = resolve_chip(chip)
    try:
        return _CATALOG[chip]
    except KeyError as exc:
        raise FlashStubUnknownVariant(f"No stub in catalog for {chip.description}") from exc


def get_stub(chip: Union[Chip, str, int]) -> FlashStub:
    """Get flash stub for the chip.

    Every call parses the resource again and returns a new descriptor owned by the caller.

    :param chip: Chip member, chip name or chip id.
    :raises FlashStubUnknownVariant: The chip is not supported.
    :raises FlashStubMalformedResource: The shipped resource is corrupted.
    :return: Flash stub descriptor.
    """
    chip = resolve_chip(chip)
    logger.debug(f"Looking up flash stub for {chip.description}")
    return FlashStub.parse(get_stub_resource(chip), chip=chip)


def verify_catalog() -> list[FlashStub]:
    """Check integrity of every shipped stub.

    Intended as a start-up self check of the flashing tool: each resource is parsed,
    both segments are decoded and checked for overlap.

    :raises FlashStubMalformedResource: A resource is corrupted.
    :raises FlashStubEncodingError: A payload is not valid base64.
    :raises FlashStubOverlapError: Segments of a stub overlap.
    :return: Verified stubs in chip enumeration order.
    """
    stubs = []
    for chip in Chip:
        stub = get_stub(chip)
        stub.validate()
        stubs.append(stub)
    logger.debug(f"All {len(stubs)} flash stubs verified")
    return stubs
