"""Crop settings: schema, validation and persistence."""

from .manager import CropSettings, SettingsManager, default_settings_path
from .schema import DEFAULT_SETTINGS, SETTINGS_SCHEMA, merge_with_defaults, validate_settings

__all__ = [
    "DEFAULT_SETTINGS",
    "SETTINGS_SCHEMA",
    "CropSettings",
    "SettingsManager",
    "default_settings_path",
    "merge_with_defaults",
    "validate_settings",
]
