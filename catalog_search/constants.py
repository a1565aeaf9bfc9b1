# catalog_search/constants.py
"""
Centralized constants for catalog-search.

This module is the single source of truth for:
- Element ids and class names the pre-rendered listing pages use
- Selectors the record extractor reads sub-fields with
- Per record-kind view profiles (which regions exist, how they are hidden)
- Default settings scaffold

If the site template changes, update this file and the extractor, renderer
and paginator will follow.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Dict, Any, Optional

APP_NAME: Final[str] = "catalog-search"

PLUGINS: Final[str] = "plugins"
GUIDES: Final[str] = "guides"
RECORD_KINDS: Final[tuple[str, ...]] = (PLUGINS, GUIDES)

# ---- Inputs ----------------------------------------------------------------

QUERY_INPUT_ID: Final[str] = "query"
MOBILE_QUERY_INPUT_ID: Final[str] = "mobile-query"
FACET_SELECT_ID: Final[str] = "grails-version-select"
SEARCH_BOX_CLASS: Final[str] = "search-box-inline"
SEARCH_CLEAR_SELECTOR: Final[str] = ".search-clear-btn"
HAS_VALUE_CLASS: Final[str] = "has-value"

# ---- Plugin listing --------------------------------------------------------

ALL_PLUGINS_CLASS: Final[str] = "all-plugins"
PLUGIN_ITEM_SELECTOR: Final[str] = f"div.{ALL_PLUGINS_CLASS} ul > li.plugin"
PLUGIN_ITEM_CLASS: Final[str] = "plugin"
PLUGIN_LIST_SELECTOR: Final[str] = "div.plugins ul.plugin-list"
PLUGIN_LIST_CLASS: Final[str] = "plugin-list"

PLUGIN_NAME_SELECTOR: Final[str] = ".name"
PLUGIN_DESC_SELECTOR: Final[str] = ".desc"
PLUGIN_OWNER_SELECTOR: Final[str] = ".owner"
PLUGIN_LABEL_SELECTOR: Final[str] = ".label"
PLUGIN_SOURCE_LINK_SELECTOR: Final[str] = "h3.name > a"
VERSION_BADGE_SELECTOR: Final[str] = ".grails-compat, .compat"

# ---- Guide listing ---------------------------------------------------------

GUIDE_CLASS: Final[str] = "guide"
MULTI_GUIDE_CLASS: Final[str] = "multi-guide"
GUIDE_TAG_CLASS: Final[str] = "tag"
GUIDE_TITLE_CLASS: Final[str] = "title"
GUIDE_VERSION_BLOCK_CLASS: Final[str] = "align-left"
GUIDE_VERSION_LINK_CLASS: Final[str] = "grails-version"
GUIDE_LIST_SELECTOR: Final[str] = "div.guide-group ul"

# ---- Shared regions --------------------------------------------------------

SEARCH_RESULTS_SELECTOR: Final[str] = "div.search-results"
SEARCH_RESULTS_LABEL_SELECTOR: Final[str] = "h3.search-results-label"
NO_RESULTS_SELECTOR: Final[str] = ".no-results"
PAGINATION_SELECTOR: Final[str] = ".pagination-container"
PAGINATION_BOTTOM_CLASS: Final[str] = "bottom"

HIDDEN_CLASS: Final[str] = "hidden"
ACTIVE_CLASS: Final[str] = "active"
OPEN_CLASS: Final[str] = "open"
PAGE_LINK_HREF: Final[str] = "javascript:void(0)"

# ---- Page glue -------------------------------------------------------------

TAB_SELECTOR: Final[str] = ".plugins-nav .nav-tab"
TAB_CONTENT_SELECTOR: Final[str] = ".tab-content"
TAB_ATTR: Final[str] = "data-tab"

COPY_BUTTON_CLASS: Final[str] = "copy-btn"
COPY_ATTR: Final[str] = "data-coords"
COPIED_CLASS: Final[str] = "copied"
COPIED_MARK: Final[str] = "✓"

VERSION_DROPDOWN_CLASS: Final[str] = "version-dropdown"
VERSION_CURRENT_CLASS: Final[str] = "version-current"

NO_GUIDE_RESULTS_HTML: Final[str] = (
    "<div class='guide-group'><div class='guide-group-header'>"
    "<h2>No results found</h2></div></div>"
)

# ---- View profiles ---------------------------------------------------------

VISIBILITY_CLASS: Final[str] = "class"   # toggle the `hidden` class
VISIBILITY_STYLE: Final[str] = "style"   # toggle inline display:none/block


@dataclass(frozen=True, slots=True)
class ViewProfile:
    """Which regions a page of one record kind has and how they toggle."""
    kind: str
    default_regions: tuple[str, ...]
    results_region: str
    list_selector: str
    visibility: str = VISIBILITY_CLASS
    no_results_region: Optional[str] = None
    heading_region: Optional[str] = None
    paginate: bool = True


PLUGIN_PROFILE: Final[ViewProfile] = ViewProfile(
    kind=PLUGINS,
    default_regions=(f".{ALL_PLUGINS_CLASS}", ".all-plugins-label"),
    results_region=SEARCH_RESULTS_SELECTOR,
    list_selector=f"ul.{PLUGIN_LIST_CLASS}",
    visibility=VISIBILITY_CLASS,
    no_results_region=NO_RESULTS_SELECTOR,
    heading_region=SEARCH_RESULTS_LABEL_SELECTOR,
    paginate=True,
)

GUIDE_PROFILE: Final[ViewProfile] = ViewProfile(
    kind=GUIDES,
    default_regions=(
        ".training",
        ".latest-guides",
        ".guide-group",
        ".tags-by-topic",
        ".guides-suggestion",
    ),
    results_region=SEARCH_RESULTS_SELECTOR,
    list_selector=GUIDE_LIST_SELECTOR,
    visibility=VISIBILITY_STYLE,
    paginate=False,
)

PROFILES: Final[Dict[str, ViewProfile]] = {
    PLUGINS: PLUGIN_PROFILE,
    GUIDES: GUIDE_PROFILE,
}

# ---- Viewport estimate -----------------------------------------------------

BASE_DOCUMENT_HEIGHT: Final[int] = 800
ESTIMATED_ROW_HEIGHT: Final[int] = 96

# ---- Defaults / settings scaffold -----------------------------------------

DEFAULT_PAGE_SIZE: Final[int] = 20
DEFAULT_MIN_QUERY_LENGTH: Final[int] = 2
DEFAULT_FRAMEWORK_LABEL: Final[str] = "Framework"
DEFAULT_FLASH_MS: Final[int] = 1500

DEFAULT_SETTINGS: Final[Dict[str, Any]] = {
    "page_size": DEFAULT_PAGE_SIZE,
    "min_query_length": DEFAULT_MIN_QUERY_LENGTH,
    "framework_label": DEFAULT_FRAMEWORK_LABEL,
    "flash_ms": DEFAULT_FLASH_MS,
    "log_level": "INFO",
}
