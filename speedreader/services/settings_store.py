"""JSON file storage for reader settings and theme preference."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from speedreader.exceptions import SettingsError
from speedreader.models.enums import Theme
from speedreader.models.settings import ReaderSettings

logger = logging.getLogger(__name__)

SETTINGS_KEY = "settings"
THEME_KEY = "theme"


class SettingsStore:
    """
    Persist reader settings in a small JSON document.

    Loading never fails: a missing, unreadable or invalid file yields the
    defaults. Save failures are logged and swallowed so a read-only home
    directory cannot interrupt reading.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}

        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise SettingsError(f"Expected a JSON object in {self.path}")
        return data

    def _read_or_empty(self) -> Dict[str, Any]:
        try:
            return self._read()
        except (OSError, ValueError, SettingsError):
            return {}

    def _write(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def get_settings(self) -> ReaderSettings:
        """Return stored settings merged over the defaults."""
        try:
            stored = self._read().get(SETTINGS_KEY) or {}
            if not isinstance(stored, dict):
                raise SettingsError(
                    f"Expected '{SETTINGS_KEY}' to be a JSON object in {self.path}"
                )
            merged = {**ReaderSettings().model_dump(), **stored}
            return ReaderSettings.model_validate(merged)
        except (OSError, ValueError, SettingsError) as e:
            # pydantic's ValidationError and json.JSONDecodeError are ValueErrors
            logger.warning("Failed to load settings: %s", e)
            return ReaderSettings()

    def save_settings(self, settings: ReaderSettings) -> None:
        data = self._read_or_empty()
        data[SETTINGS_KEY] = settings.model_dump(mode="json")
        try:
            self._write(data)
        except OSError as e:
            logger.warning("Failed to save settings: %s", e)

    def update_setting(self, key: str, value: Any) -> ReaderSettings:
        """
        Update a single setting and persist the result.

        Args:
            key: ReaderSettings field name.
            value: New value, validated against the field.

        Returns:
            The updated settings.

        Raises:
            SettingsError: If the key is unknown or the value is invalid.
        """
        if key not in ReaderSettings.model_fields:
            raise SettingsError(f"Unknown setting: {key}")

        settings = self.get_settings()
        try:
            updated = ReaderSettings.model_validate({**settings.model_dump(), key: value})
        except ValidationError as e:
            raise SettingsError(f"Invalid value for {key}: {value!r}") from e

        self.save_settings(updated)
        return updated

    def get_theme(self) -> Theme:
        """Return the theme preference, SYSTEM when unset or unreadable."""
        try:
            return Theme(self._read().get(THEME_KEY, Theme.SYSTEM.value))
        except (OSError, ValueError, SettingsError):
            return Theme.SYSTEM

    def save_theme(self, theme: Theme) -> None:
        data = self._read_or_empty()
        data[THEME_KEY] = Theme(theme).value
        try:
            self._write(data)
        except OSError as e:
            logger.warning("Failed to save theme: %s", e)
