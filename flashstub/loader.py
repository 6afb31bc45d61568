#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Load plan of a flash stub.

The serial protocol layer uploads a stub into RAM with the ROM loader commands:

    1. memory-begin (size, block count, block size, address) for the segment
    2. memory-data for every block, numbered from zero
    3. repeat for the next segment
    4. memory-end with the entry address, the stub starts running
    5. read the handshake greeting sent by the stub

This module prepares everything those commands need without talking to any device.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Union

from typing_extensions import Self

from flashstub.constants import DEFAULT_TIMEOUT, EXPECTED_STUB_HANDSHAKE, FLASH_WRITE_SIZE
from flashstub.exceptions import FlashStubValueError
from flashstub.stub import FlashStub, StubSegment
from flashstub.utils.misc import format_value, size_fmt, split_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemoryBlock:
    """One memory-data block of a segment."""

    sequence: int
    address: int
    data: bytes = field(repr=False)


@dataclass(frozen=True)
class SegmentLoad:
    """Segment split into memory-data blocks.

    :param name: Segment name, 'text' or 'data'.
    :param address: Load address of the segment.
    :param size: Segment size in bytes.
    :param block_size: Maximal size of one block.
    :param blocks: Blocks in the order they are sent.
    """

    name: str
    address: int
    size: int
    block_size: int
    blocks: tuple[MemoryBlock, ...] = field(repr=False)

    @property
    def block_count(self) -> int:
        """Number of memory-data blocks of the segment."""
        return len(self.blocks)

    @classmethod
    def from_segment(cls, name: str, segment: StubSegment, block_size: int) -> Self:
        """Split decoded segment into blocks.

        :param name: Segment name.
        :param segment: Decoded segment.
        :param block_size: Maximal size of one block.
        :return: Segment load description.
        """
        blocks = tuple(
            MemoryBlock(sequence=i, address=segment.address + i * block_size, data=chunk)
            for i, chunk in enumerate(split_data(segment.data, block_size))
        )
        return cls(
            name=name,
            address=segment.address,
            size=len(segment.data),
            block_size=block_size,
            blocks=blocks,
        )

    def __str__(self) -> str:
        return (
            f"{self.name} segment at {format_value(self.address, 32)}, "
            f"{size_fmt(self.size)} in {self.block_count} block(s)"
        )


@dataclass(frozen=True)
class StubLoadPlan:
    """Everything needed to upload and start a flash stub."""

    entry: int
    segments: tuple[SegmentLoad, ...]
    handshake: str = EXPECTED_STUB_HANDSHAKE
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_stub(cls, stub: FlashStub, block_size: int = FLASH_WRITE_SIZE) -> Self:
        """Create load plan of the stub.

        Both segments are decoded once here, the plan holds the raw bytes.

        :param stub: Flash stub descriptor.
        :param block_size: Maximal size of one memory-data block.
        :raises FlashStubValueError: Block size is not positive.
        :raises FlashStubEncodingError: Payload of the stub is not valid base64.
        :return: Load plan.
        """
        if block_size <= 0:
            raise FlashStubValueError(f"Block size must be positive, got {block_size}")
        segments = (
            SegmentLoad.from_segment("text", stub.text(), block_size),
            SegmentLoad.from_segment("data", stub.data(), block_size),
        )
        plan = cls(entry=stub.entry(), segments=segments)
        for segment in segments:
            logger.debug(f"Stub load plan: {segment}")
        return plan

    def __iter__(self) -> Iterator[SegmentLoad]:
        return iter(self.segments)

    @property
    def total_size(self) -> int:
        """Number of bytes uploaded to the device."""
        return sum(segment.size for segment in self.segments)

    def is_handshake(self, response: Union[str, bytes]) -> bool:
        """Check whether response received after memory-end is the stub greeting.

        :param response: Payload read from the device.
        :return: True if the stub is running.
        """
        if isinstance(response, bytes):
            return response == self.handshake.encode("ascii")
        return response == self.handshake
