#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Enumeration with tag, label and description carried by each member.

Members can be looked up by the numeric tag or by the (case-insensitive) label, which
lets callers select a chip either by its id read from the device or by its name.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from typing_extensions import Self

from flashstub.exceptions import FlashStubKeyError, FlashStubTypeError


@dataclass(frozen=True)
class StubEnumMember:
    """Single member of a stub enumeration.

    Holds the numeric tag, human-readable label and optional description.
    """

    tag: int
    label: str
    description: Optional[str] = None


class StubEnum(StubEnumMember, Enum):
    """Enumeration with tag based identification and flexible member lookup.

    Members compare equal to their tag and to their label.
    """

    def __eq__(self, __value: object) -> bool:
        """Check equality of enum member with another object.

        :param __value: Object to compare with, enum member, tag or label.
        :return: True if the object equals tag or label, False otherwise.
        """
        if isinstance(__value, StubEnum):
            return type(self) is type(__value) and self.tag == __value.tag
        return self.tag == __value or self.label == __value

    def __hash__(self) -> int:
        """Calculate hash value for the enum member.

        :return: Hash value as integer.
        """
        return hash((self.tag, self.label, self.description))

    def __str__(self) -> str:
        """Get member label.

        :return: Label of the member.
        """
        return self.label

    @classmethod
    def labels(cls) -> list[str]:
        """Get list of labels of all enum members.

        :return: List of all labels.
        """
        return [value.label for value in cls.__members__.values()]

    @classmethod
    def tags(cls) -> list[int]:
        """Get list of tags of all enum members.

        :return: List of all tags.
        """
        return [value.tag for value in cls.__members__.values()]

    @classmethod
    def contains(cls, obj: Union[int, str]) -> bool:
        """Check if member with given tag/label exists in enum.

        :param obj: Label or tag of enum member to check for existence.
        :raises FlashStubTypeError: Object must be either string or integer.
        :return: True if member exists, False otherwise.
        """
        if isinstance(obj, bool) or not isinstance(obj, (int, str)):
            raise FlashStubTypeError("Object must be either string or integer")
        try:
            cls.from_attr(obj)
            return True
        except FlashStubKeyError:
            return False

    @classmethod
    def from_attr(cls, attribute: Union[int, str]) -> Self:
        """Get enum member with given tag/label attribute.

        :param attribute: Tag value (int) or label value (str) of the enum member to find.
        :return: Found enum member matching the given attribute.
        """
        # Let's make MyPy happy, see https://github.com/python/mypy/issues/10740
        from_tag: Callable = cls.from_tag
        from_label: Callable = cls.from_label
        from_method: Callable = from_tag if isinstance(attribute, int) else from_label
        return from_method(attribute)

    @classmethod
    def from_tag(cls, tag: int) -> Self:
        """Get enum member with given tag.

        :param tag: Tag to be used for searching
        :raises FlashStubKeyError: If enum with given tag is not found
        :return: Found enum member
        """
        for item in cls.__members__.values():
            if item.tag == tag:
                return item
        raise FlashStubKeyError(f"There is no {cls.__name__} item with tag {tag} defined")

    @classmethod
    def from_label(cls, label: str) -> Self:
        """Get enum member with given label, case-insensitive.

        :param label: Label to be used for searching
        :raises FlashStubKeyError: If enum with given label is not found or label is not string
        :return: Found enum member
        """
        if not isinstance(label, str):
            raise FlashStubKeyError("Label must be string")
        for item in cls.__members__.values():
            if item.label.upper() == label.upper():
                return item
        raise FlashStubKeyError(f"There is no {cls.__name__} item with label {label} defined")
