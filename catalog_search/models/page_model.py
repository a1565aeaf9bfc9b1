# catalog_search/models/page_model.py
"""
Pagination state and the viewport the paginator scrolls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, List, Tuple


@dataclass(slots=True)
class PageState:
    items: List[Any] = field(default_factory=list)
    page_size: int = 20
    current_page: int = 1

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self.items) / self.page_size) if self.items else 0

    def bounds(self, page: int) -> Tuple[int, int]:
        """Half-open item range [start, end) shown on a 1-indexed page."""
        start = (page - 1) * self.page_size
        return start, min(start + self.page_size, len(self.items))

    def page_items(self, page: int) -> List[Any]:
        start, end = self.bounds(page)
        return self.items[start:end]


@dataclass(slots=True)
class Viewport:
    """
    Vertical scroll position over a document of measurable height.

    measure() returns the current document height, so it reflects whatever
    the last re-render did.
    """
    measure: Callable[[], float]
    scroll_y: float = 0.0

    @property
    def scroll_height(self) -> float:
        return float(self.measure())

    def distance_from_bottom(self) -> float:
        return self.scroll_height - self.scroll_y

    def scroll_to(self, y: float) -> None:
        self.scroll_y = max(0.0, float(y))
