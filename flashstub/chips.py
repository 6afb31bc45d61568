#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Supported target chips.

The set is closed: every member must have exactly one stub resource in the catalog,
which is checked when :mod:`flashstub.catalog` is imported.
"""

from flashstub.utils.stub_enum import StubEnum


class Chip(StubEnum):
    """Chip variants with a flasher stub.

    Tag is the image chip id reported by the ROM loader, label is the chip name used for
    the stub resource file, description is the marketing name.
    """

    ESP32 = (0, "esp32", "ESP32")
    ESP32S2 = (2, "esp32s2", "ESP32-S2")
    ESP32C3 = (5, "esp32c3", "ESP32-C3")
    ESP32S3 = (9, "esp32s3", "ESP32-S3")
    ESP32C2 = (12, "esp32c2", "ESP32-C2")
    ESP32C6 = (13, "esp32c6", "ESP32-C6")
    ESP32H2 = (16, "esp32h2", "ESP32-H2")
