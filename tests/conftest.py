#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Pytest configuration and shared test fixtures."""

import logging
import os

import pytest

os.environ["FLASHSTUB_DEBUG_LOGGING_DISABLED"] = "True"


@pytest.fixture(scope="module")
def data_dir(request: pytest.FixtureRequest) -> str:
    """Get test data directory path for the current test module.

    Constructs the absolute path to the 'data' directory located alongside
    the test file that is currently being executed.

    :param request: Pytest request fixture containing test execution context.
    :return: Absolute path to the test data directory.
    """
    logging.debug(f"data_dir for module: {request.fspath}")
    data_path = os.path.join(os.path.dirname(request.fspath), "data")
    logging.debug(f"data_dir: {data_path}")
    return data_path


@pytest.fixture(scope="module")
def resources_dir(data_dir: str) -> str:
    """Get directory with hand-made stub resources.

    :param data_dir: Test data directory.
    :return: Absolute path to the resources directory.
    """
    return os.path.join(data_dir, "resources")
