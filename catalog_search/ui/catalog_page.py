# catalog_search/ui/catalog_page.py
"""
CatalogPage — one-time bootstrap of a listing page.

Order matters: records are extracted before the default listing is
paginated, because pagination detaches the items that are not on page 1.
"""

from __future__ import annotations

from typing import Optional

from ..app import AppContext
from .. import constants
from ..models.record_model import RecordIndex
from ..services.extract_service import ExtractService
from ..services.filter_service import FilterEngine, strategy_for
from .copy_button import CopyButtons
from .paginator import paginate
from .regions import RegionRegistry
from .results_view import ResultsView
from .search_controller import SearchController
from .tabs import TabNavigator
from .version_dropdown import VersionDropdowns


def detect_kind(ctx: AppContext) -> str:
    """plugins if the page has the plugin listing container, else guides."""
    if ctx.document.select_one(f"div.{constants.ALL_PLUGINS_CLASS}") is not None:
        return constants.PLUGINS
    return constants.GUIDES


class CatalogPage:
    def __init__(self, ctx: AppContext, kind: Optional[str] = None):
        self.ctx = ctx
        self.kind = kind or detect_kind(ctx)
        if self.kind not in constants.RECORD_KINDS:
            raise ValueError(f"Unknown record kind: {self.kind!r}")
        self.profile = constants.PROFILES[self.kind]

        self.registry: Optional[RegionRegistry] = None
        self.index: Optional[RecordIndex] = None
        self.view: Optional[ResultsView] = None
        self.controller: Optional[SearchController] = None
        self.tabs = TabNavigator(ctx)
        self.copy_buttons = CopyButtons(ctx)
        self.dropdowns = VersionDropdowns(ctx)

    def load(self) -> "CatalogPage":
        ctx = self.ctx
        self.registry = RegionRegistry.build(ctx.document, self.profile)
        ctx.regions = self.registry

        self.index = ExtractService(ctx).build_index(self.kind)

        default_items = []
        if self.profile.paginate and self.registry.default_list is not None:
            default_items = self._default_items()
            paginate(ctx, default_items, self.registry.default_list,
                     self.registry.pagination_mounts, ctx.settings.page_size)

        engine = FilterEngine(strategy_for(self.kind), ctx.settings.min_query_length)
        self.view = ResultsView(ctx, self.registry)
        self.controller = SearchController(ctx, self.index, engine, self.view, default_items)
        self.controller.bind()

        self.tabs.bind()
        self.tabs.restore_from_fragment(ctx.fragment)
        self.copy_buttons.bind()
        self.dropdowns.bind()

        ctx.bus.status.emit(f"Loaded {len(self.index)} {self.kind}")
        return self

    def html(self) -> str:
        return str(self.ctx.document)

    # ---- internals ----

    def _default_items(self):
        # the first listing container owns the default list
        container = self.ctx.document.select_one(f"div.{constants.ALL_PLUGINS_CLASS}")
        if container is None:
            return []
        return container.find_all(class_=constants.PLUGIN_ITEM_CLASS)
