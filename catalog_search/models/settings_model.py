# catalog_search/models/settings_model.py
"""
Typed settings model for catalog-search.

- Stores user-configurable options with safe defaults
- Validation is minimal here; file handling lives in SettingsService
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(slots=True)
class SettingsModel:
    page_size: int = 20
    min_query_length: int = 2
    framework_label: str = "Framework"     # heading reads "<label> 5.x"
    flash_ms: int = 1500                   # copy button confirmation time
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SettingsModel":
        """
        Build a SettingsModel from a (possibly partial) dict.
        Unknown keys are ignored; missing keys fall back to defaults.
        """
        base = cls()  # defaults
        # Copy known fields only
        for field in ("page_size", "min_query_length", "framework_label",
                      "flash_ms", "log_level"):
            if field in data and data[field] is not None:
                setattr(base, field, data[field])
        # basic sanity
        if not isinstance(base.page_size, int) or isinstance(base.page_size, bool) or base.page_size < 1:
            base.page_size = 20
        if not isinstance(base.min_query_length, int) or base.min_query_length < 1:
            base.min_query_length = 2
        if not isinstance(base.flash_ms, int) or base.flash_ms < 0:
            base.flash_ms = 1500
        if not isinstance(base.framework_label, str) or not base.framework_label.strip():
            base.framework_label = "Framework"
        base.log_level = str(base.log_level).upper()
        if base.log_level not in _LOG_LEVELS:
            base.log_level = "INFO"
        return base

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable dictionary."""
        return asdict(self)
