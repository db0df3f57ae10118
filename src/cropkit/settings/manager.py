"""Settings file management with validation and change notifications."""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Callable, Mapping
from copy import deepcopy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jsonschema import ValidationError

from .. import config
from ..errors import SettingsLoadError, SettingsValidationError
from ..geometry.types import FREE, AspectRatio, aspect_from_value
from ..utils.logging import get_logger
from .schema import DEFAULT_SETTINGS, merge_with_defaults

LOGGER = get_logger(__name__)

SettingsListener = Callable[[str, Any], None]


def default_settings_path() -> Path:
    """Return the default settings.json location for the current platform."""

    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "cropkit" / "settings.json"
        return Path.home() / "AppData" / "Roaming" / "cropkit" / "settings.json"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "cropkit" / "settings.json"
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / "cropkit" / "settings.json"
    return Path.home() / ".config" / "cropkit" / "settings.json"


@dataclass(frozen=True)
class CropSettings:
    """Tunables consumed by the crop session."""

    buffer: float = config.CROP_BUFFER
    min_size: float = config.MIN_CROP
    aspect: AspectRatio = field(default=FREE)
    rotation_step: float = config.ROTATION_DEGREES_PER_PIXEL

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> CropSettings:
        """Build from the ``crop`` section of a validated settings document."""
        return cls(
            buffer=float(values.get("buffer", config.CROP_BUFFER)),
            min_size=float(values.get("min_size", config.MIN_CROP)),
            aspect=aspect_from_value(values.get("aspect")),
            rotation_step=float(values.get("rotation_step", config.ROTATION_DEGREES_PER_PIXEL)),
        )


class SettingsManager:
    """Load, validate and persist crop settings."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._data: dict[str, Any] = deepcopy(DEFAULT_SETTINGS)
        self._listeners: list[SettingsListener] = []

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    @property
    def path(self) -> Path:
        return self._path or default_settings_path()

    def load(self) -> None:
        """Load the settings JSON from disk, creating defaults if missing."""

        path = self.path
        self._path = path
        if path.exists():
            try:
                payload = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                raise SettingsLoadError(f"{path}: {exc}") from exc
        else:
            LOGGER.debug("No settings file at %s; writing defaults", path)
            payload = None
        if payload is not None and not isinstance(payload, dict):
            raise SettingsLoadError(f"{path}: expected a JSON object")
        try:
            self._data = merge_with_defaults(payload)
        except ValidationError as exc:
            raise SettingsValidationError(exc.message) from exc
        self._write()

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return the value for *key*, supporting dotted access for nested keys."""

        target: Any = self._data
        for part in key.split("."):
            if not isinstance(target, dict) or part not in target:
                return default
            target = target[part]
        return target

    def set(self, key: str, value: Any) -> None:
        """Update *key* with *value*, validate and persist the change."""

        candidate = deepcopy(self._data)
        parts = key.split(".")
        target: dict[str, Any] = candidate
        for part in parts[:-1]:
            branch = target.get(part)
            if not isinstance(branch, dict):
                branch = {}
                target[part] = branch
            target = branch
        target[parts[-1]] = value
        try:
            self._data = merge_with_defaults(candidate)
        except ValidationError as exc:
            raise SettingsValidationError(exc.message) from exc
        self._write()
        for listener in list(self._listeners):
            listener(key, value)

    def subscribe(self, listener: SettingsListener) -> Callable[[], None]:
        """Register *listener* for changes; returns a callable that removes it."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def crop_settings(self) -> CropSettings:
        return CropSettings.from_mapping(self._data.get("crop", {}))

    # ------------------------------------------------------------------
    # Internal utilities
    # ------------------------------------------------------------------
    def _write(self) -> None:
        path = self.path
        self._path = path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self._data, indent=2, sort_keys=True), encoding="utf-8")


__all__ = ["CropSettings", "SettingsManager", "default_settings_path"]
