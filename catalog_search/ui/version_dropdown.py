# catalog_search/ui/version_dropdown.py
"""
VersionDropdowns — click-to-toggle `.version-dropdown` menus on plugin items.

A click inside `.version-current` toggles `open` on its dropdown and closes
every other one; a click anywhere else closes them all.
"""

from __future__ import annotations

from typing import Optional

from bs4 import Tag

from ..app import AppContext
from .. import constants
from ..utils.dom import closest, remove_class, toggle_class


class VersionDropdowns:
    def __init__(self, ctx: AppContext):
        self.ctx = ctx

    def bind(self) -> None:
        self.ctx.events.delegate(self.on_click)

    def on_click(self, target: Optional[Tag]) -> Optional[Tag]:
        """Handle a click on target. Returns the dropdown left open, if any."""
        current = closest(target, constants.VERSION_CURRENT_CLASS)
        dropdown = closest(current, constants.VERSION_DROPDOWN_CLASS) if current else None
        for d in self.ctx.document.find_all(class_=constants.VERSION_DROPDOWN_CLASS):
            if d is not dropdown:
                remove_class(d, constants.OPEN_CLASS)
        if dropdown is None:
            return None
        return dropdown if toggle_class(dropdown, constants.OPEN_CLASS) else None
