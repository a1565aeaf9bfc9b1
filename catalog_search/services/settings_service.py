# catalog_search/services/settings_service.py
"""
SettingsService — load/save catalog-search settings.

Responsibilities:
- Read a settings JSON file (optionally create it from defaults)
- Validate & merge with defaults (unknown keys ignored)
- Apply settings to a running AppContext (page size, labels, log level)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import json
import logging

from .. import constants
from ..models.settings_model import SettingsModel

_log = logging.getLogger("catalog_search")


class SettingsService:
    def __init__(self, settings_path: Optional[Path] = None):
        self.settings_path: Optional[Path] = Path(settings_path) if settings_path else None

    # ---- Public API ------------------------------------------------------

    def init_defaults(self) -> SettingsModel:
        """
        Ensure the settings file exists; if not, create it with DEFAULT_SETTINGS.
        Load the file, merge, and return the model.
        """
        if self.settings_path is not None and not self.settings_path.exists():
            _log.info("Creating default settings at %s", self.settings_path)
            self._write_json(self.settings_path, constants.DEFAULT_SETTINGS)
        return self.load()

    def load(self) -> SettingsModel:
        """
        Load settings JSON → SettingsModel (merged with defaults).
        A missing or unreadable file yields the defaults.
        """
        raw: dict = {}
        if self.settings_path is not None and self.settings_path.exists():
            try:
                raw = self._read_json(self.settings_path)
            except Exception as e:
                _log.warning("Failed to read settings (%s). Using defaults. Error: %s",
                             self.settings_path, e)
                raw = {}
            if not isinstance(raw, dict):
                _log.warning("Settings file %s is not a JSON object. Using defaults.",
                             self.settings_path)
                raw = {}

        # Merge with defaults (shallow)
        merged = dict(constants.DEFAULT_SETTINGS)
        merged.update(raw or {})
        return SettingsModel.from_dict(merged)

    def save(self, model: SettingsModel) -> None:
        if self.settings_path is None:
            raise ValueError("No settings path configured")
        self._write_json(self.settings_path, model.to_dict())

    def apply_to_context(self, ctx, model: SettingsModel) -> None:
        """
        Apply settings to a running AppContext. Page size takes effect the
        next time a list is paginated.
        """
        ctx.settings = model
        ctx.logger.setLevel(getattr(logging, model.log_level, logging.INFO))
        ctx.bus.status.emit(f"Settings applied • page size: {model.page_size}")

    # ---- Internals -------------------------------------------------------

    def _read_json(self, path: Path) -> dict:
        text = path.read_text(encoding="utf-8")
        return json.loads(text)

    def _write_json(self, path: Path, data: dict) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(data, indent=2, ensure_ascii=False)
        path.write_text(text, encoding="utf-8")
