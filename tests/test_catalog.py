#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the flash stub catalog.

Covers totality of the chip to stub mapping, lookup by chip name and id, the published
values of the shipped stubs and the import time exhaustiveness check.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pytest

import flashstub
from flashstub.catalog import (
    STUB_RESOURCES,
    STUBS_FOLDER,
    _load_catalog,
    get_stub,
    get_stub_resource,
    resolve_chip,
    verify_catalog,
)
from flashstub.chips import Chip
from flashstub.exceptions import FlashStubCatalogError, FlashStubUnknownVariant
from flashstub.stub import FlashStub

# chip, entry, text start, text size, data start, data size
PUBLISHED_STUBS = [
    (Chip.ESP32, 0x400BE5D8, 0x400BE000, 3432, 0x3FFDEBA8, 156),
    (Chip.ESP32C2, 0x403805B8, 0x40380000, 3340, 0x3FCB6BA8, 160),
    (Chip.ESP32C3, 0x4038069C, 0x40380000, 3776, 0x3FC96BB0, 160),
    (Chip.ESP32C6, 0x40800690, 0x40800000, 3696, 0x40852BAC, 160),
    (Chip.ESP32H2, 0x40800690, 0x40800000, 3696, 0x40842BAC, 160),
    (Chip.ESP32S2, 0x400287F0, 0x40028000, 4344, 0x3FFE2BFC, 160),
    (Chip.ESP32S3, 0x40378A3C, 0x40378000, 5144, 0x3FCB2BF8, 252),
]


@pytest.mark.parametrize("chip", list(Chip))
def test_every_chip_has_stub(chip: Chip) -> None:
    stub = get_stub(chip)
    assert isinstance(stub, FlashStub)
    assert stub.chip is chip


def test_catalog_is_exhaustive() -> None:
    assert set(STUB_RESOURCES) == set(Chip)
    assert len(set(STUB_RESOURCES.values())) == len(Chip)


def test_esp32_published_stub() -> None:
    """Entry point and text size of the ESP32 stub match the published build."""
    stub = get_stub(Chip.ESP32)
    assert stub.entry() == 0x400BE5D8
    address, code = stub.text()
    assert address == 0x400BE000
    assert len(code) == 3432


@pytest.mark.parametrize(
    "chip,entry,text_start,text_size,data_start,data_size", PUBLISHED_STUBS
)
def test_published_stubs(
    chip: Chip, entry: int, text_start: int, text_size: int, data_start: int, data_size: int
) -> None:
    stub = get_stub(chip)
    assert stub.entry() == entry
    text = stub.text()
    data = stub.data()
    assert (text.address, len(text.data)) == (text_start, text_size)
    assert (data.address, len(data.data)) == (data_start, data_size)


@pytest.mark.parametrize("chip", list(Chip))
def test_shipped_segments_do_not_overlap(chip: Chip) -> None:
    stub = get_stub(chip)
    text_start, text = stub.text()
    data_start, data = stub.data()
    assert text_start + len(text) <= data_start or data_start + len(data) <= text_start
    stub.validate()


@pytest.mark.parametrize(
    "value,expected",
    [
        (Chip.ESP32S3, Chip.ESP32S3),
        ("esp32c3", Chip.ESP32C3),
        ("ESP32C6", Chip.ESP32C6),
        (16, Chip.ESP32H2),
        (0, Chip.ESP32),
    ],
)
def test_resolve_chip(value: Any, expected: Chip) -> None:
    assert resolve_chip(value) is expected


@pytest.mark.parametrize("value", ["esp8266", "esp32p4", "", 1, 99, -1, None, True, 1.5])
def test_unknown_variant(value: Any) -> None:
    with pytest.raises(FlashStubUnknownVariant):
        get_stub(value)
    with pytest.raises(FlashStubUnknownVariant):
        get_stub_resource(value)


def test_unknown_variant_is_key_error() -> None:
    with pytest.raises(KeyError):
        get_stub("esp8266")


def test_lookup_by_name_and_id_gives_same_stub() -> None:
    assert get_stub("esp32s2") == get_stub(Chip.ESP32S2) == get_stub(2)


def test_every_lookup_creates_new_descriptor() -> None:
    first = get_stub(Chip.ESP32C3)
    second = get_stub(Chip.ESP32C3)
    assert first == second
    assert first is not second


def test_different_chips_give_different_stubs() -> None:
    assert get_stub(Chip.ESP32C3) != get_stub(Chip.ESP32C2)


def test_resource_text_parses_to_stub() -> None:
    text = get_stub_resource(Chip.ESP32)
    assert '"text_start"' in text
    assert FlashStub.parse(text) == get_stub(Chip.ESP32)


def test_package_level_api() -> None:
    assert flashstub.get_stub is get_stub
    assert flashstub.get_stub(flashstub.Chip.ESP32).entry() == 0x400BE5D8


def test_verify_catalog() -> None:
    stubs = verify_catalog()
    assert [stub.chip for stub in stubs] == list(Chip)


def test_concurrent_lookups() -> None:
    chips = list(Chip) * 8
    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda chip: get_stub(chip).text(), chips))
    for chip, segment in zip(chips, results):
        assert segment == get_stub(chip).text()


def test_incomplete_catalog_fails() -> None:
    with pytest.raises(FlashStubCatalogError, match="esp32c2"):
        _load_catalog({Chip.ESP32: "esp32.json"}, STUBS_FOLDER)


def test_shared_resource_fails() -> None:
    resources = dict(STUB_RESOURCES)
    resources[Chip.ESP32H2] = resources[Chip.ESP32C6]
    with pytest.raises(FlashStubCatalogError):
        _load_catalog(resources, STUBS_FOLDER)


def test_missing_resource_file_fails(tmpdir: Any) -> None:
    with pytest.raises(FlashStubCatalogError, match="ESP32"):
        _load_catalog(STUB_RESOURCES, str(tmpdir))


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        flashstub.catalog._CATALOG[Chip.ESP32] = "{}"  # type: ignore[index]
