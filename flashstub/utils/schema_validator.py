#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""JSON schema validation of structural records.

Thin layer on top of fastjsonschema that turns validation failures into readable
messages and handles properties not described by the schema.
"""

import copy
import logging
import re
from typing import Any

import fastjsonschema

from flashstub import FLASHSTUB_SCHEMA_STRICT
from flashstub.exceptions import FlashStubError

logger = logging.getLogger(__name__)


def _print_validation_fail_reason(exc: fastjsonschema.JsonSchemaValueException) -> str:
    """Format JSON schema validation failure into human-readable error message.

    :param exc: The JSON schema validation exception to process.
    :return: Formatted error message explaining the validation failure reason.
    """
    message = str(exc)
    if exc.rule == "required" and isinstance(exc.value, dict):
        missing = filter(lambda x: x not in exc.value.keys(), exc.rule_definition)
        message += f"; Missing field(s): {', '.join(missing)}"
    elif exc.rule in ("minimum", "maximum"):
        message += f"; Value {exc.value} is out of range"
    return message


def check_unknown_properties(config_dict: dict, schema_dict: dict, path: str = "") -> None:
    """Check for properties in configuration that are not described by the schema.

    Unknown properties are errors in strict mode (FLASHSTUB_SCHEMA_STRICT), warnings otherwise.
    Only the top level object and nested objects with 'properties' are inspected.

    :param config_dict: Configuration dictionary to check.
    :param schema_dict: JSON schema dictionary defining allowed properties.
    :param path: Current path in the configuration for error reporting.
    :raises FlashStubError: When unknown property is found and strict mode is enabled.
    """
    if "properties" not in schema_dict and "patternProperties" not in schema_dict:
        return

    schema_props = schema_dict.get("properties", {})
    pattern_props = schema_dict.get("patternProperties", {})

    for key, value in config_dict.items():
        current_path = f"{path}.{key}" if path else key
        if key in schema_props:
            if isinstance(value, dict) and isinstance(schema_props[key], dict):
                check_unknown_properties(value, schema_props[key], current_path)
            continue

        if any(re.match(pattern, key) for pattern in pattern_props):
            continue

        error_msg = f"Unknown property found in configuration: '{current_path}'"
        if FLASHSTUB_SCHEMA_STRICT:
            raise FlashStubError(error_msg)
        logger.warning(error_msg)


def check_config(
    config: Any,
    schemas: list[dict[str, Any]],
    check_unknown_props: bool = False,
) -> None:
    """Check the configuration by provided list of validation schemas.

    Schemas are applied one after another, all of them must pass.

    :param config: Configuration to validate.
    :param schemas: List of JSON schema dictionaries for validation.
    :param check_unknown_props: Whether to check and warn about unknown properties in config.
    :raises FlashStubError: Invalid validation schema or configuration validation failed.
    """
    config_to_check = copy.deepcopy(config)

    for schema in schemas:
        try:
            validator = fastjsonschema.compile(schema)
        except (TypeError, fastjsonschema.JsonSchemaDefinitionException) as exc:
            raise FlashStubError(f"Invalid validation schema to check config: {str(exc)}") from exc
        try:
            validator(config_to_check)
        except fastjsonschema.JsonSchemaValueException as exc:
            message = _print_validation_fail_reason(exc)
            raise FlashStubError(f"Configuration validation failed: {message}") from exc

        if check_unknown_props and isinstance(config_to_check, dict):
            check_unknown_properties(config_to_check, schema)
