#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""StubEnum and Chip enumeration tests."""

import pytest

from flashstub.chips import Chip
from flashstub.exceptions import FlashStubKeyError, FlashStubTypeError
from flashstub.utils.stub_enum import StubEnum


class StubEnumNumbers(StubEnum):
    """Test enumeration with numeric values."""

    ONE = (1, "TheOne")
    TWO = (2, "TheTwo", "Just two.")
    THREE = (3, "TheThree")


class OtherNumbers(StubEnum):
    """Second enumeration with the same tags."""

    ONE = (1, "One")


def test_simple_check() -> None:
    assert StubEnumNumbers.ONE.tag == 1
    assert StubEnumNumbers.TWO.label == "TheTwo"
    assert StubEnumNumbers.TWO.description == "Just two."
    assert StubEnumNumbers.THREE.description is None


def test_equals() -> None:
    assert StubEnumNumbers.ONE == 1
    assert StubEnumNumbers.ONE == "TheOne"
    assert StubEnumNumbers.ONE != 2
    assert StubEnumNumbers.ONE == StubEnumNumbers.ONE
    assert StubEnumNumbers.ONE != StubEnumNumbers.TWO
    assert StubEnumNumbers.ONE != OtherNumbers.ONE


def test_from_tag() -> None:
    assert StubEnumNumbers.from_tag(2) is StubEnumNumbers.TWO
    with pytest.raises(FlashStubKeyError):
        StubEnumNumbers.from_tag(4)


def test_from_label() -> None:
    assert StubEnumNumbers.from_label("TheThree") is StubEnumNumbers.THREE
    assert StubEnumNumbers.from_label("thethree") is StubEnumNumbers.THREE
    with pytest.raises(FlashStubKeyError):
        StubEnumNumbers.from_label("TheFour")
    with pytest.raises(FlashStubKeyError):
        StubEnumNumbers.from_label(3)  # type: ignore[arg-type]


def test_from_attr() -> None:
    assert StubEnumNumbers.from_attr(1) is StubEnumNumbers.ONE
    assert StubEnumNumbers.from_attr("TheTwo") is StubEnumNumbers.TWO


def test_contains() -> None:
    assert StubEnumNumbers.contains(1)
    assert StubEnumNumbers.contains("TheOne")
    assert not StubEnumNumbers.contains(4)
    assert not StubEnumNumbers.contains("TheFour")
    with pytest.raises(FlashStubTypeError):
        StubEnumNumbers.contains(1.0)  # type: ignore[arg-type]
    with pytest.raises(FlashStubTypeError):
        StubEnumNumbers.contains(True)


def test_labels_and_tags() -> None:
    assert StubEnumNumbers.labels() == ["TheOne", "TheTwo", "TheThree"]
    assert StubEnumNumbers.tags() == [1, 2, 3]


def test_str() -> None:
    assert str(StubEnumNumbers.TWO) == "TheTwo"


def test_hashable() -> None:
    mapping = {StubEnumNumbers.ONE: "one", StubEnumNumbers.TWO: "two"}
    assert mapping[StubEnumNumbers.ONE] == "one"
    assert len(set(StubEnumNumbers)) == 3


def test_chip_members_are_unique() -> None:
    assert len(set(Chip.tags())) == len(Chip)
    assert len(set(Chip.labels())) == len(Chip)


def test_chip_names() -> None:
    assert Chip.from_label("esp32c3") is Chip.ESP32C3
    assert Chip.from_tag(9) is Chip.ESP32S3
    assert Chip.ESP32H2.description == "ESP32-H2"
    assert all(label == label.lower() for label in Chip.labels())
