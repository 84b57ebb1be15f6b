from typing import Optional
from pathlib import Path
from pydantic import ValidationError
import logging
import json
import os

from models.settings import PeriodSettings


class SettingsError(Exception):
    """Raised when the settings file cannot be read or validated"""
    pass


class SettingsStore:
    def __init__(self, settings_file: Optional[Path]=Path('period_settings.json')):
        self.settings_file = settings_file or Path('period_settings.json')
        self.settings: PeriodSettings = self._load_settings(self.settings_file)

    def _load_settings(self, settings_file: Path) -> PeriodSettings:
        if not settings_file.exists():
            logging.info(f"No settings file at {settings_file}, using defaults")
            return PeriodSettings()

        try:
            with open(settings_file, 'r') as f:
                data = json.load(f)
            return PeriodSettings.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            logging.error(f"Invalid settings file {settings_file}: {e}")
            raise SettingsError(f"Invalid settings file {settings_file}") from e

    def get(self) -> PeriodSettings:
        return self.settings

    def update(self, **changes) -> PeriodSettings:
        """Validate and persist a changed copy of the current settings"""
        try:
            updated = PeriodSettings.model_validate({**self.settings.model_dump(), **changes})
        except ValidationError as e:
            raise SettingsError(f"Invalid settings: {e}") from e

        self._save_settings(updated)
        self.settings = updated
        return updated

    def _save_settings(self, settings: PeriodSettings) -> None:
        # write beside the target and swap, so a failed write leaves the old file intact
        tmp_file = self.settings_file.with_name(self.settings_file.name + '.tmp')
        try:
            with open(tmp_file, 'w') as f:
                json.dump(settings.model_dump(), f, indent=2)
            os.replace(tmp_file, self.settings_file)
        except Exception as e:
            logging.error(f"Error saving settings: {e}")
            tmp_file.unlink(missing_ok=True)
            raise
