# catalog_search/models/filter_model.py
"""
Filter state and filter outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


@dataclass(slots=True)
class FilterState:
    query: str = ""           # primary search input
    mobile_query: str = ""    # mirror input shown on small screens
    facet: str = ""           # selected major framework version, "" = any

    @property
    def effective_query(self) -> str:
        """Trimmed primary query, or the trimmed mobile one when the primary is empty."""
        return self.query.strip() or self.mobile_query.strip()

    @property
    def effective_facet(self) -> str:
        return (self.facet or "").strip()


class FilterOutcome(Enum):
    RESET = "reset"           # nothing active: restore the default listing
    UNCHANGED = "unchanged"   # query too short: leave the current view alone
    MATCHED = "matched"       # engine ran; records may be empty


@dataclass(slots=True)
class FilterResult:
    outcome: FilterOutcome
    records: List = field(default_factory=list)
    query: str = ""           # query that took part in matching ("" if ignored)
    facet: str = ""

    @property
    def is_empty(self) -> bool:
        return self.outcome is FilterOutcome.MATCHED and not self.records
