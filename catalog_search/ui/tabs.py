# catalog_search/ui/tabs.py
"""
TabNavigator — `.plugins-nav .nav-tab` tabs switching `.tab-content` panes.

Activating a tab replaces the location fragment with `#<tabId>` (no reload);
an initial fragment naming a tab activates that tab on load.
"""

from __future__ import annotations

from typing import List, Optional

from bs4 import Tag

from ..app import AppContext
from .. import constants
from ..utils.dom import add_class, remove_class


class TabNavigator:
    def __init__(self, ctx: AppContext):
        self.ctx = ctx
        self.tabs: List[Tag] = []
        self.contents: List[Tag] = []

    def bind(self) -> None:
        doc = self.ctx.document
        self.tabs = doc.select(constants.TAB_SELECTOR)
        self.contents = doc.select(constants.TAB_CONTENT_SELECTOR)
        for tab in self.tabs:
            self.ctx.events.bind(tab, lambda t=tab: self.activate(t))

    def activate(self, tab: Tag) -> None:
        for t in self.tabs:
            remove_class(t, constants.ACTIVE_CLASS)
        for c in self.contents:
            remove_class(c, constants.ACTIVE_CLASS)
        add_class(tab, constants.ACTIVE_CLASS)

        tab_id = tab.get(constants.TAB_ATTR) or ""
        content = self.ctx.document.find(id=tab_id) if tab_id else None
        if content is not None:
            add_class(content, constants.ACTIVE_CLASS)

        self.ctx.fragment = f"#{tab_id}"
        self.ctx.bus.tab_activated.emit(tab_id)

    def find_tab(self, tab_id: str) -> Optional[Tag]:
        for t in self.tabs:
            if t.get(constants.TAB_ATTR) == tab_id:
                return t
        return None

    def restore_from_fragment(self, fragment: str) -> bool:
        """Activate the tab named by '#tab-id'. Returns False if there is none."""
        tab_id = (fragment or "").lstrip("#")
        if not tab_id:
            return False
        tab = self.find_tab(tab_id)
        if tab is None:
            self.ctx.logger.debug("Fragment #%s names no tab", tab_id)
            return False
        self.ctx.events.click(tab)
        return True
