#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Miscellaneous helpers for address and size handling."""

import re
from typing import Generator, Union

from flashstub.exceptions import FlashStubValueError

UINT32_MAX = (1 << 32) - 1


def format_value(value: int, size: int, delimiter: str = "_", use_prefix: bool = True) -> str:
    """Convert integer value to formatted binary or hexadecimal string representation.

    The function selects binary format when size is not divisible by 8, otherwise uses
    hexadecimal format. Digits are grouped by 4 characters using the delimiter.

    :param value: Integer value to be converted.
    :param size: Bit size that determines output format and padding.
    :param delimiter: Character used to separate digit groups, defaults to underscore.
    :param use_prefix: Whether to include format prefix (0b/0x), defaults to True.
    :return: Formatted string representation of the value.
    """
    padding = size if size % 8 else (size // 8) * 2
    infix = "b" if size % 8 else "x"
    sign = "-" if value < 0 else ""
    parts = re.findall(".{1,4}", f"{abs(value):0{padding}{infix}}"[::-1])
    rev = delimiter.join(parts)[::-1]
    prefix = f"0{infix}" if use_prefix else ""
    return f"{sign}{prefix}{rev}"


def size_fmt(num: Union[float, int], use_kibibyte: bool = True) -> str:
    """Format byte size into human-readable string representation.

    :param num: The byte size value to format.
    :param use_kibibyte: If True, use binary prefixes (1024-based) with 'iB' suffix,
                         if False, use decimal prefixes (1000-based) with 'B' suffix.
    :return: Formatted size string with value and unit (e.g., "1.5 kiB", "1000 B").
    """
    base, suffix = [(1000.0, "B"), (1024.0, "iB")][use_kibibyte]
    i = "B"
    for i in ["B"] + [i + suffix for i in list("kMGTP")]:
        if num < base:
            break
        num /= base

    return f"{int(num)} {i}" if i == "B" else f"{num:3.1f} {i}"


def split_data(data: Union[bytearray, bytes], size: int) -> Generator[bytes, None, None]:
    """Split data into chunks of specified size.

    The last chunk is shorter when the data length is not a multiple of the size.

    :param data: Data to be split.
    :param size: Chunk size in bytes.
    :raises FlashStubValueError: Chunk size is not positive.
    :return: Generator of data chunks.
    """
    if size <= 0:
        raise FlashStubValueError(f"Chunk size must be positive, got {size}")
    for i in range(0, len(data), size):
        yield bytes(data[i : i + size])
