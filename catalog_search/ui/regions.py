# catalog_search/ui/regions.py
"""
RegionRegistry — logical region names mapped to the elements that render them.

Built once per page. A logical region may be rendered by several elements
(e.g. the same label above and below a list); show/hide always applies to
all of them. Pagination mounts carry their own scroll-anchoring flag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from .. import constants
from ..constants import ViewProfile
from ..utils.dom import add_class, display_of, has_class, remove_class, set_display

DEFAULT = "default"
RESULTS = "results"
NO_RESULTS = "no_results"
HEADING = "heading"


@dataclass(slots=True)
class PaginationMount:
    element: Tag
    anchor_to_viewport_bottom: bool = False


@dataclass(slots=True)
class RegionRegistry:
    profile: ViewProfile
    regions: Dict[str, List[Tag]] = field(default_factory=dict)
    pagination_mounts: List[PaginationMount] = field(default_factory=list)
    default_list: Optional[Tag] = None

    @classmethod
    def build(cls, document: BeautifulSoup, profile: ViewProfile,
              bottom_class: str = constants.PAGINATION_BOTTOM_CLASS) -> "RegionRegistry":
        regions: Dict[str, List[Tag]] = {DEFAULT: []}
        for sel in profile.default_regions:
            regions[DEFAULT].extend(document.select(sel))
        regions[RESULTS] = document.select(profile.results_region)
        regions[NO_RESULTS] = document.select(profile.no_results_region) if profile.no_results_region else []
        regions[HEADING] = document.select(profile.heading_region) if profile.heading_region else []

        mounts = [
            PaginationMount(el, anchor_to_viewport_bottom=has_class(el, bottom_class))
            for el in document.select(constants.PAGINATION_SELECTOR)
        ] if profile.paginate else []

        default_list = document.select_one(constants.PLUGIN_LIST_SELECTOR) \
            if profile.kind == constants.PLUGINS else None

        return cls(profile=profile, regions=regions,
                   pagination_mounts=mounts, default_list=default_list)

    # ---- lookups ----

    def get(self, name: str) -> List[Tag]:
        return self.regions.get(name, [])

    def first(self, name: str) -> Optional[Tag]:
        tags = self.get(name)
        return tags[0] if tags else None

    def has(self, name: str) -> bool:
        return bool(self.get(name))

    # ---- visibility ----

    def show(self, name: str) -> None:
        for tag in self.get(name):
            if self.profile.visibility == constants.VISIBILITY_STYLE:
                set_display(tag, "block")
            else:
                remove_class(tag, constants.HIDDEN_CLASS)

    def hide(self, name: str) -> None:
        for tag in self.get(name):
            if self.profile.visibility == constants.VISIBILITY_STYLE:
                set_display(tag, "none")
            else:
                add_class(tag, constants.HIDDEN_CLASS)

    def is_visible(self, name: str) -> bool:
        """True when every element of the region is visible."""
        tags = self.get(name)
        if not tags:
            return False
        if self.profile.visibility == constants.VISIBILITY_STYLE:
            return all(display_of(t) != "none" for t in tags)
        return all(not has_class(t, constants.HIDDEN_CLASS) for t in tags)
