#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Protocol constants used when the stub is uploaded and started."""

# Size of one memory-data block sent to the ROM loader
FLASH_WRITE_SIZE = 0x400
# Greeting sent by the stub once it runs
EXPECTED_STUB_HANDSHAKE = "OHAI"
# Seconds to wait for a response, handshake included
DEFAULT_TIMEOUT = 3.0
