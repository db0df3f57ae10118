"""Custom exception hierarchy for cropkit."""

from __future__ import annotations


class CropKitError(Exception):
    """Base class for all custom errors raised by cropkit."""


# --- 2-layer hierarchy ---

class DomainError(CropKitError):
    """Base class for crop geometry errors."""


class SettingsError(CropKitError):
    """Base class for settings related failures."""


# --- Domain errors ---

class InvalidAspectRatioError(DomainError):
    """Raised when an aspect ratio is not a finite, positive number."""


class DegenerateGeometryError(DomainError):
    """Raised when a transform cannot be inverted."""


# --- Settings errors ---

class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""
