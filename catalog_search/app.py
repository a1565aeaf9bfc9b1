# catalog_search/app.py
"""
Core application wiring for catalog-search (listing search & pagination).

- Bus: a tiny Qt signal hub shared by the page adapters
- AppContext: typed container for the document, state, registries, logger and bus

Everything a page needs lives on one explicitly built AppContext, so two
pages (or two tests) never share state.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
from typing import Any, Optional

from bs4 import BeautifulSoup
from PyQt5.QtCore import QObject, pyqtSignal

from . import constants
from .models.filter_model import FilterState
from .models.page_model import Viewport
from .models.settings_model import SettingsModel
from .utils.dom import ClickRegistry


class Bus(QObject):
    """
    Page event bus. Inputs flow in through the *_edited/*_selected signals,
    notifications flow out through the rest.

    Signals:
      - query_edited(str): primary search input changed.
      - mobile_query_edited(str): mobile search input changed.
      - facet_selected(str): framework version select changed.
      - clear_requested(): search clear button activated.
      - results_changed(int): matched record count, -1 for the default listing.
      - page_changed(int): active page of the current list.
      - tab_activated(str): id of the newly active tab.
      - copied(str): text written to the clipboard.
      - status(str): short status line messages.
    """
    query_edited = pyqtSignal(str)
    mobile_query_edited = pyqtSignal(str)
    facet_selected = pyqtSignal(str)
    clear_requested = pyqtSignal()
    results_changed = pyqtSignal(int)
    page_changed = pyqtSignal(int)
    tab_activated = pyqtSignal(str)
    copied = pyqtSignal(str)
    status = pyqtSignal(str)


@dataclass(slots=True)
class AppContext:
    """
    Per-page application state.

    Attributes:
      document:          Parsed page (mutated in place by the view adapters).
      settings:          Effective settings.
      state:             Current query/facet state.
      events:            Click handlers bound to rendered elements.
      viewport:          Scroll position and document height.
      bus:               Page event bus instance.
      logger:            Preconfigured logger for the app.
      source_path:       File the document was read from, if any.
      fragment:          Location fragment ("#tab-id") of the page.
      regions:           Region registry, built once by CatalogPage.
      active_paginator:  Paginator of the list currently on screen.
    """
    document: BeautifulSoup
    settings: SettingsModel
    state: FilterState
    events: ClickRegistry
    viewport: Viewport
    bus: Bus
    logger: logging.Logger
    source_path: Optional[Path] = None
    fragment: str = ""
    regions: Any = None
    active_paginator: Any = None


def build_default_context(html: str,
                          settings: Optional[SettingsModel] = None,
                          source_path: Optional[Path] = None) -> AppContext:
    """
    Build a usable AppContext around an HTML page.

    - the page is parsed with the stdlib-backed "html.parser"
    - settings default to SettingsModel() when not given
    - the viewport estimates document height from the rendered list rows
    """
    document = BeautifulSoup(html or "", "html.parser")
    settings = settings or SettingsModel()

    logger = _make_logger("catalog_search")
    logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    logger.debug("Initialized AppContext",
                 extra={"source_path": str(source_path) if source_path else "",
                        "page_size": settings.page_size})

    return AppContext(
        document=document,
        settings=settings,
        state=FilterState(),
        events=ClickRegistry(),
        viewport=Viewport(measure=lambda: _estimate_height(document)),
        bus=Bus(),
        logger=logger,
        source_path=source_path,
    )


# ---- internals -----------------------------------------------------------

def _estimate_height(document: BeautifulSoup) -> float:
    rows = len(document.find_all("li"))
    return float(constants.BASE_DOCUMENT_HEIGHT + rows * constants.ESTIMATED_ROW_HEIGHT)


def _make_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(logging.INFO)
        ch = logging.StreamHandler()
        ch.setLevel(logging.DEBUG)
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        ch.setFormatter(fmt)
        logger.addHandler(ch)
        # Avoid duplicate logs if parent handlers exist
        logger.propagate = False
    return logger


__all__ = ["Bus", "AppContext", "build_default_context"]
