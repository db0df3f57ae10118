"""Schema helpers for the crop settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from .. import config

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "cropkit/settings.schema.json",
    "type": "object",
    "required": ["schema", "crop"],
    "properties": {
        "schema": {"const": "cropkit/settings@1"},
        "crop": {
            "type": "object",
            "required": ["buffer", "min_size", "aspect", "rotation_step"],
            "properties": {
                "buffer": {
                    "type": "number",
                    "minimum": 0,
                    "exclusiveMaximum": 0.5,
                },
                "min_size": {"type": "number", "exclusiveMinimum": 0},
                "aspect": {
                    "oneOf": [
                        {"type": "null"},
                        {"type": "number", "exclusiveMinimum": 0},
                    ],
                },
                "rotation_step": {"type": "number", "exclusiveMinimum": 0},
            },
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "cropkit/settings@1",
    "crop": {
        "buffer": config.CROP_BUFFER,
        "min_size": config.MIN_CROP,
        "aspect": None,
        "rotation_step": config.ROTATION_DEGREES_PER_PIXEL,
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key == "crop" and isinstance(value, dict):
                target = merged.setdefault("crop", {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema."""

    _validator.validate(data)


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]
