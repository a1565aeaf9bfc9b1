# catalog_search/services/filter_service.py
"""
FilterService — boolean matching of records against the query/facet state.

Predicates are plain functions so they can be composed and tested alone.
FilterEngine is shared by both record kinds; what differs per kind lives in
a small strategy object (PluginStrategy, GuideStrategy).

Matching never ranks: results keep extraction order.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .. import constants
from ..models.filter_model import FilterOutcome, FilterResult, FilterState
from ..models.record_model import MultiGuide, PluginRecord, Record


# ---- Predicates --------------------------------------------------------------

def title_match(title: Optional[str], query: str) -> bool:
    """
    Case-insensitive substring test. A query with spaces also matches when
    every whitespace-separated term occurs somewhere in the title.
    """
    if title is None:
        return False
    t = title.lower()
    q = query.lower()
    if q in t:
        return True
    return " " in q and all(term in t for term in q.split())


def owner_match(owner: Optional[str], query: str) -> bool:
    return owner is not None and query.lower() in owner.lower()


def tag_match(tags: Iterable[str], query: str) -> bool:
    q = query.lower()
    return any(q in tag.lower() for tag in tags)


def facet_match(versions: Iterable[str], facet: Optional[str]) -> bool:
    """True if no facet is set, or any version is `facet` or `facet.<minor...>`."""
    if not facet:
        return True
    prefix = facet + "."
    return any(v == facet or v.startswith(prefix) for v in versions)


# ---- Strategies --------------------------------------------------------------

class PluginStrategy:
    kind = constants.PLUGINS
    supports_facet = True

    def query_match(self, record: PluginRecord, query: str) -> bool:
        return (title_match(record.name, query)
                or owner_match(record.owner, query)
                or tag_match(record.labels, query))

    def facet_match(self, record: PluginRecord, facet: str) -> bool:
        return facet_match(record.framework_versions, facet)


class GuideStrategy:
    kind = constants.GUIDES
    supports_facet = False

    def query_match(self, record, query: str) -> bool:
        if title_match(record.title, query):
            return True
        if isinstance(record, MultiGuide):
            return any(tag_match(v.tags, query) for v in record.versions)
        return tag_match(record.tags, query)

    def facet_match(self, record, facet: str) -> bool:
        return True


STRATEGIES = {
    constants.PLUGINS: PluginStrategy,
    constants.GUIDES: GuideStrategy,
}


def strategy_for(kind: str):
    try:
        return STRATEGIES[kind]()
    except KeyError:
        raise ValueError(f"Unknown record kind: {kind!r}") from None


# ---- Engine ------------------------------------------------------------------

class FilterEngine:
    def __init__(self, strategy, min_query_length: int = constants.DEFAULT_MIN_QUERY_LENGTH):
        self.strategy = strategy
        self.min_query_length = min_query_length

    def match(self, records: Sequence[Record], query: str, facet: str = "") -> List[Record]:
        """
        Records matching query (ignored if empty) and facet (ignored if empty),
        in their original order.
        """
        query = (query or "").strip()
        facet = (facet or "").strip() if self.strategy.supports_facet else ""
        out = []
        for r in records:
            if query and not self.strategy.query_match(r, query):
                continue
            if facet and not self.strategy.facet_match(r, facet):
                continue
            out.append(r)
        return out

    def evaluate(self, records: Sequence[Record], state: FilterState) -> FilterResult:
        """
        Decide what a filter-state change means for the view:

        - no query and no facet      -> RESET (restore the default listing)
        - too-short query, no facet  -> UNCHANGED (keep whatever is shown)
        - otherwise                  -> MATCHED; a too-short query is ignored
                                        in favour of the facet alone
        """
        query = state.effective_query
        facet = state.effective_facet if self.strategy.supports_facet else ""

        if not query and not facet:
            return FilterResult(FilterOutcome.RESET)
        if query and len(query) < self.min_query_length and not facet:
            return FilterResult(FilterOutcome.UNCHANGED)
        if len(query) < self.min_query_length:
            query = ""
        return FilterResult(
            FilterOutcome.MATCHED,
            records=self.match(records, query, facet),
            query=query,
            facet=facet,
        )
