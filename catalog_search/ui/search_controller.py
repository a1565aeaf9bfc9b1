# catalog_search/ui/search_controller.py
"""
SearchController — binds page inputs to the filter engine and the views.

Every input change (either query box, the framework version select, the
clear button) funnels into on_filter_changed(), which evaluates the engine
and moves the page into the matching view state. Inputs that a page does
not have are simply not wired.
"""

from __future__ import annotations

from typing import Any, List, Optional

from bs4 import Tag

from ..app import AppContext
from .. import constants
from ..models.filter_model import FilterOutcome, FilterResult
from ..models.record_model import RecordIndex
from ..services.filter_service import FilterEngine
from ..services.markup_service import filter_summary
from ..utils.dom import closest, toggle_class
from .paginator import paginate
from .results_view import ResultsView


class SearchController:
    def __init__(self, ctx: AppContext, index: RecordIndex, engine: FilterEngine,
                 view: ResultsView, default_items: Optional[List[Any]] = None):
        self.ctx = ctx
        self.index = index
        self.engine = engine
        self.view = view
        self.default_items = list(default_items or [])
        self.last_result: Optional[FilterResult] = None

        doc = ctx.document
        self.query_input: Optional[Tag] = doc.find(id=constants.QUERY_INPUT_ID)
        self.mobile_input: Optional[Tag] = doc.find(id=constants.MOBILE_QUERY_INPUT_ID)
        self.facet_select: Optional[Tag] = doc.find(id=constants.FACET_SELECT_ID)
        self.search_box: Optional[Tag] = closest(self.query_input, constants.SEARCH_BOX_CLASS)
        self.clear_button: Optional[Tag] = (
            self.search_box.select_one(constants.SEARCH_CLEAR_SELECTOR) if self.search_box else None
        )

    # ---- wiring ----

    def bind(self) -> None:
        bus = self.ctx.bus
        if self.query_input is not None:
            bus.query_edited.connect(self.on_query_edited)
        else:
            self.ctx.logger.debug("No #%s input; query search disabled", constants.QUERY_INPUT_ID)
        if self.mobile_input is not None:
            bus.mobile_query_edited.connect(self.on_mobile_query_edited)
        if self.facet_select is not None and self.engine.strategy.supports_facet:
            bus.facet_selected.connect(self.on_facet_selected)
        if self.clear_button is not None:
            bus.clear_requested.connect(self.on_clear_clicked)
            self.ctx.events.bind(self.clear_button, self.on_clear_clicked)

    # ---- input handlers ----

    def on_query_edited(self, text: str) -> None:
        self.ctx.state.query = text or ""
        if self.query_input is not None:
            self.query_input["value"] = self.ctx.state.query
        if self.search_box is not None:
            toggle_class(self.search_box, constants.HAS_VALUE_CLASS, len(self.ctx.state.query) > 0)
        self.on_filter_changed()

    def on_mobile_query_edited(self, text: str) -> None:
        self.ctx.state.mobile_query = text or ""
        if self.mobile_input is not None:
            self.mobile_input["value"] = self.ctx.state.mobile_query
        self.on_filter_changed()

    def on_facet_selected(self, value: str) -> None:
        self.ctx.state.facet = value or ""
        if self.facet_select is not None:
            self._mark_selected_option(self.ctx.state.facet)
        self.on_filter_changed()

    def on_clear_clicked(self) -> None:
        self.ctx.state.query = ""
        if self.query_input is not None:
            self.query_input["value"] = ""
        if self.search_box is not None:
            toggle_class(self.search_box, constants.HAS_VALUE_CLASS, False)
        self.on_filter_changed()

    # ---- core ----

    def on_filter_changed(self) -> FilterResult:
        result = self.engine.evaluate(self.index.records, self.ctx.state)

        if result.outcome is FilterOutcome.RESET:
            self.reset_default()
        elif result.outcome is FilterOutcome.UNCHANGED:
            self.ctx.logger.debug("Query %r below minimum length; view unchanged",
                                  self.ctx.state.effective_query)
        elif result.records:
            self._show_results(result)
        else:
            self.view.show_no_results_view(result)
            self.ctx.bus.results_changed.emit(0)
            self.ctx.bus.status.emit("No results")

        self.last_result = result
        return result

    def reset_default(self) -> None:
        self.view.show_default_view()
        if self.view.profile.paginate:
            paginate(self.ctx, self.default_items, self.view.registry.default_list,
                     self.view.registry.pagination_mounts, self.ctx.settings.page_size)
        self.ctx.bus.results_changed.emit(-1)

    # ---- internals ----

    def _show_results(self, result: FilterResult) -> None:
        listing = self.view.show_results_view(result)
        if listing is not None and self.view.profile.paginate:
            items = listing.find_all(class_=constants.PLUGIN_ITEM_CLASS)
            paginate(self.ctx, items, listing, self.view.registry.pagination_mounts,
                     self.ctx.settings.page_size)
        count = len(result.records)
        self.ctx.logger.info("%d match(es) for %s", count,
                             filter_summary(result.query, result.facet, self.ctx.settings.framework_label))
        self.ctx.bus.results_changed.emit(count)
        self.ctx.bus.status.emit(f"{count} result(s)")

    def _mark_selected_option(self, value: str) -> None:
        for opt in self.facet_select.find_all("option"):
            if opt.get("value", opt.get_text(strip=True)) == value:
                opt["selected"] = "selected"
            elif opt.has_attr("selected"):
                del opt["selected"]
