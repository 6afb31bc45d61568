#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Flash stub descriptor.

A stub resource is a small JSON record as emitted by the stub build tooling::

    {
      "entry": <uint32>,
      "text": "<base64 string>",
      "text_start": <uint32>,
      "data": "<base64 string>",
      "data_start": <uint32>
    }

The same format is consumed by other flashing tools, so field names and the base64
flavor (standard alphabet, padded) must not change. The descriptor keeps the payloads
encoded and decodes them every time a segment is requested.
"""

import base64
import json
import logging
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Optional, Union

from typing_extensions import Self

from flashstub.chips import Chip
from flashstub.exceptions import (
    FlashStubEncodingError,
    FlashStubError,
    FlashStubMalformedResource,
    FlashStubOverlapError,
)
from flashstub.utils.misc import UINT32_MAX, format_value, size_fmt
from flashstub.utils.schema_validator import check_config

logger = logging.getLogger(__name__)

ADDRESS_FIELDS = ("entry", "text_start", "data_start")


def _chip_name(chip: Optional[Chip]) -> str:
    return (chip.description or chip.label) if chip else "unknown chip"


class StubSegment(NamedTuple):
    """Decoded stub segment, the raw bytes paired with their load address."""

    address: int
    data: bytes

    @property
    def end(self) -> int:
        """First address after the segment."""
        return self.address + len(self.data)

    def overlaps(self, other: "StubSegment") -> bool:
        """Check whether two segments share at least one address.

        Empty segments never overlap anything.

        :param other: Segment to compare with.
        :return: True if address ranges intersect.
        """
        if not self.data or not other.data:
            return False
        return self.address < other.end and other.address < self.end


@dataclass(frozen=True)
class FlashStub:
    """Parsed flash stub resource.

    Immutable, comparable and safe to share between threads. The optional chip only
    serves diagnostics and does not take part in comparison.
    """

    entry_address: int
    encoded_text: str = field(repr=False)
    text_start: int
    encoded_data: str = field(repr=False)
    data_start: int
    chip: Optional[Chip] = field(default=None, compare=False)

    def __str__(self) -> str:
        """Get short description of the stub.

        :return: Description with entry point and segment addresses.
        """
        return (
            f"Flash stub for {self._origin}: entry {format_value(self.entry_address, 32)}, "
            f"text at {format_value(self.text_start, 32)}, "
            f"data at {format_value(self.data_start, 32)}"
        )

    @property
    def _origin(self) -> str:
        return _chip_name(self.chip)

    @staticmethod
    def get_validation_schema() -> dict[str, Any]:
        """Get JSON schema of the stub resource record.

        :return: Validation schema.
        """
        address = {"type": "integer", "minimum": 0, "maximum": UINT32_MAX}
        return {
            "type": "object",
            "title": "Flash stub resource",
            "required": ["entry", "text", "text_start", "data", "data_start"],
            "properties": {
                "entry": address,
                "text": {"type": "string"},
                "text_start": address,
                "data": {"type": "string"},
                "data_start": address,
            },
        }

    @classmethod
    def parse(cls, text: Union[str, bytes], chip: Optional[Chip] = None) -> Self:
        """Parse stub resource text into descriptor.

        :param text: Serialized stub resource (JSON).
        :param chip: Chip the resource belongs to, used in error messages.
        :raises FlashStubMalformedResource: Resource is not valid JSON or doesn't match the schema.
        :return: Flash stub descriptor.
        """
        origin = _chip_name(chip)
        try:
            config = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise FlashStubMalformedResource(
                f"Stub resource for {origin} is not well-formed: {str(exc)}"
            ) from exc
        return cls.from_dict(config, chip=chip)

    @classmethod
    def from_dict(cls, config: Any, chip: Optional[Chip] = None) -> Self:
        """Create descriptor from already deserialized stub resource record.

        :param config: Deserialized stub resource.
        :param chip: Chip the resource belongs to, used in error messages.
        :raises FlashStubMalformedResource: Record doesn't match the stub resource schema.
        :return: Flash stub descriptor.
        """
        origin = _chip_name(chip)
        try:
            check_config(config, [cls.get_validation_schema()], check_unknown_props=True)
        except FlashStubError as exc:
            raise FlashStubMalformedResource(
                f"Invalid stub resource for {origin}: {exc.description}"
            ) from exc
        # fastjsonschema accepts integral floats as integers
        for name in ADDRESS_FIELDS:
            if isinstance(config[name], bool) or not isinstance(config[name], int):
                raise FlashStubMalformedResource(
                    f"Invalid stub resource for {origin}: '{name}' must be an integer, "
                    f"got {config[name]!r}"
                )

        stub = cls(
            entry_address=config["entry"],
            encoded_text=config["text"],
            text_start=config["text_start"],
            encoded_data=config["data"],
            data_start=config["data_start"],
            chip=chip,
        )
        logger.debug(f"Parsed {stub}")
        return stub

    def to_dict(self) -> dict[str, Union[int, str]]:
        """Get stub resource record.

        :return: Dictionary with fields in the order used by stub tooling.
        """
        return {
            "entry": self.entry_address,
            "text": self.encoded_text,
            "text_start": self.text_start,
            "data": self.encoded_data,
            "data_start": self.data_start,
        }

    def export(self) -> str:
        """Serialize stub into resource text.

        :return: JSON text of the stub resource.
        """
        return json.dumps(self.to_dict(), indent=2) + "\n"

    def entry(self) -> int:
        """Get address where execution starts after the stub is loaded."""
        return self.entry_address

    def _decode(self, name: str, encoded: str) -> bytes:
        """Decode transport-encoded payload.

        Decoding is strict: only the standard alphabet with padding is accepted and the
        unused bits of the last character must be zero.

        :param name: Name of the payload field, used in error messages.
        :param encoded: Base64 text to decode.
        :raises FlashStubEncodingError: Text is not canonical standard base64.
        :return: Decoded bytes.
        """
        try:
            raw = base64.b64decode(encoded, validate=True)
        except ValueError as exc:
            raise FlashStubEncodingError(
                f"Invalid {name} payload in stub for {self._origin}: {str(exc)}"
            ) from exc
        if base64.b64encode(raw).decode("ascii") != encoded:
            raise FlashStubEncodingError(
                f"Invalid {name} payload in stub for {self._origin}: non-zero residual bits"
            )
        logger.debug(f"Decoded {name} segment of {self._origin} stub, {size_fmt(len(raw))}")
        return raw

    def text(self) -> StubSegment:
        """Decode text segment.

        :raises FlashStubEncodingError: Text payload is not valid base64.
        :return: Load address and code bytes.
        """
        return StubSegment(self.text_start, self._decode("text", self.encoded_text))

    def data(self) -> StubSegment:
        """Decode data segment.

        :raises FlashStubEncodingError: Data payload is not valid base64.
        :return: Load address and initialized data bytes.
        """
        return StubSegment(self.data_start, self._decode("data", self.encoded_data))

    def segments(self) -> list[StubSegment]:
        """Decode both segments in load order, text first."""
        return [self.text(), self.data()]

    def validate(self) -> None:
        """Check that decoded segments do not overlap.

        The resource does not store segment sizes, so both payloads are decoded first.

        :raises FlashStubEncodingError: Payload is not valid base64.
        :raises FlashStubOverlapError: Text and data address ranges intersect.
        """
        text, data = self.segments()
        if text.overlaps(data):
            raise FlashStubOverlapError(
                f"Stub for {self._origin} has overlapping segments: "
                f"text [{format_value(text.address, 32)}, {format_value(text.end, 32)}) and "
                f"data [{format_value(data.address, 32)}, {format_value(data.end, 32)})"
            )
        logger.debug(f"Segments of {self._origin} stub do not overlap")
