#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Flash stub utilities package.

Enumerations, schema validation, logging setup and small helpers shared by the
catalog and the stub descriptor.
"""
