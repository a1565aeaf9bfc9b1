# catalog_search/ui/results_view.py
"""
ResultsView — the three mutually exclusive view states of a listing page.

  default     the pre-rendered listing (and its labels)
  results     injected search results plus the results heading
  no results  the "nothing matched" region

Leaving the results state always removes injected markup and pagination
links, so nothing stale survives a state change.
"""

from __future__ import annotations

from typing import Optional, Sequence

from bs4 import Tag

from ..app import AppContext
from .. import constants
from ..models.filter_model import FilterResult
from ..services import markup_service
from ..utils.dom import set_inner_html
from .paginator import clear_pagination
from .regions import DEFAULT, HEADING, NO_RESULTS, RESULTS, RegionRegistry


class ResultsView:
    def __init__(self, ctx: AppContext, registry: RegionRegistry):
        self.ctx = ctx
        self.registry = registry
        self.profile = registry.profile

    # ---- Public API ------------------------------------------------------

    def show_default_view(self) -> None:
        self.registry.hide(NO_RESULTS)
        self.registry.hide(RESULTS)
        self.registry.hide(HEADING)
        self._clear_results()
        self.registry.show(DEFAULT)

    def show_results_view(self, result: FilterResult) -> Optional[Tag]:
        """
        Inject the matched records and switch to the results state.
        Returns the injected list element (pagination content), or None if
        the page has no results region.
        """
        results = self.registry.first(RESULTS)
        if results is None:
            self.ctx.logger.debug("No results region on this page; skipping render")
            return None

        self.registry.hide(DEFAULT)
        self._write_heading(result)
        clear_pagination(self.ctx, self.registry.pagination_mounts)
        set_inner_html(results, self.serialize(result.records, result.query))
        self.registry.show(RESULTS)
        self.registry.hide(NO_RESULTS)
        return results.select_one(self.profile.list_selector)

    def show_no_results_view(self, result: Optional[FilterResult] = None) -> None:
        self._clear_results()
        self.registry.hide(DEFAULT)
        self.registry.hide(HEADING)
        if self.registry.has(NO_RESULTS):
            self.registry.hide(RESULTS)
            self.registry.show(NO_RESULTS)
            return
        # pages without a dedicated region show the message in the results area
        results = self.registry.first(RESULTS)
        if results is not None:
            set_inner_html(results, constants.NO_GUIDE_RESULTS_HTML)
            self.registry.show(RESULTS)

    def serialize(self, records: Sequence, query: str) -> str:
        if self.profile.kind == constants.PLUGINS:
            return markup_service.render_plugins(records)
        return markup_service.render_guide_group(records, query)

    # ---- Internals -------------------------------------------------------

    def _clear_results(self) -> None:
        for tag in self.registry.get(RESULTS):
            tag.clear()
        clear_pagination(self.ctx, self.registry.pagination_mounts)

    def _write_heading(self, result: FilterResult) -> None:
        label = self.registry.first(HEADING)
        if label is None:
            return
        summary = markup_service.filter_summary(
            result.query, result.facet, self.ctx.settings.framework_label)
        span = label.find("span")
        if span is None:
            span = self.ctx.document.new_tag("span")
            label.append(span)
        span.string = summary
        self.registry.show(HEADING)
