# catalog_search/ui/paginator.py
"""
Paginator — splits an ordered item list into pages and keeps every
pagination container of the page in step with the active page.

- paginate() builds a fresh handle (page 1) for a list and renders it
- each container gets one <a> per page; the current one carries `active`
- clicking a link re-renders only the content element
- containers flagged anchor_to_viewport_bottom keep their distance from the
  bottom of the document across the re-render

A handle is replaced, never reused, when the list changes. The previous
handle's links are unbound before the containers are rebuilt.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from bs4 import Tag

from ..app import AppContext
from .. import constants
from ..models.page_model import PageState
from .regions import PaginationMount
from ..utils.dom import add_class, remove_class


class PaginatorHandle:
    def __init__(self, ctx: AppContext, items: Sequence[Any], content: Optional[Tag],
                 mounts: Sequence[PaginationMount], page_size: int):
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.ctx = ctx
        self.state = PageState(items=list(items), page_size=page_size, current_page=1)
        self.content = content
        self.mounts = list(mounts)
        self.disposed = False

    # ---- Public API ------------------------------------------------------

    @property
    def current_page(self) -> int:
        return self.state.current_page

    @property
    def total_pages(self) -> int:
        return self.state.total_pages

    def links(self, mount: PaginationMount) -> List[Tag]:
        return mount.element.find_all("a")

    def go_to(self, page: int, mount: Optional[PaginationMount] = None) -> None:
        """
        Show `page`. When triggered from a bottom-anchored container the
        scroll position is kept relative to the document bottom.
        """
        if self.disposed:
            self.ctx.logger.debug("Ignoring page %s on a replaced paginator", page)
            return
        if not 1 <= page <= max(self.total_pages, 1):
            raise ValueError(f"page {page} outside 1..{self.total_pages}")

        self.state.current_page = page
        anchored = mount is not None and mount.anchor_to_viewport_bottom
        offset = self.ctx.viewport.distance_from_bottom() if anchored else None

        self._show_items(page)

        if offset is not None:
            self.ctx.viewport.scroll_to(self.ctx.viewport.scroll_height - offset)

        self._mark_active(page)
        self.ctx.bus.page_changed.emit(page)

    def dispose(self) -> None:
        """Unbind and remove this handle's links; later clicks do nothing."""
        for m in self.mounts:
            self.ctx.events.unbind_all(self.links(m))
            m.element.clear()
        self.disposed = True

    # ---- Internals -------------------------------------------------------

    def _render(self) -> None:
        self._show_items(self.state.current_page)
        for m in self.mounts:
            self._build_links(m)

    def _show_items(self, page: int) -> None:
        if self.content is None:
            return
        self.content.clear()
        for item in self.state.page_items(page):
            self.content.append(item)

    def _build_links(self, mount: PaginationMount) -> None:
        self.ctx.events.unbind_all(self.links(mount))
        mount.element.clear()
        if self.total_pages <= 1:
            return
        for i in range(1, self.total_pages + 1):
            a = self.ctx.document.new_tag("a", href=constants.PAGE_LINK_HREF)
            a.string = str(i)
            if i == self.state.current_page:
                add_class(a, constants.ACTIVE_CLASS)
            self.ctx.events.bind(a, lambda i=i, m=mount: self.go_to(i, m))
            mount.element.append(a)

    def _mark_active(self, page: int) -> None:
        label = str(page)
        for m in self.mounts:
            for a in self.links(m):
                if a.get_text() == label:
                    add_class(a, constants.ACTIVE_CLASS)
                else:
                    remove_class(a, constants.ACTIVE_CLASS)


def paginate(ctx: AppContext, items: Sequence[Any], content: Optional[Tag],
             mounts: Sequence[PaginationMount],
             page_size: int = constants.DEFAULT_PAGE_SIZE) -> PaginatorHandle:
    """
    Replace the page's active paginator with a new one over `items` and
    render page 1 into `content` and every mount.
    """
    previous = ctx.active_paginator
    if previous is not None:
        previous.dispose()
    handle = PaginatorHandle(ctx, items, content, mounts, page_size)
    handle._render()
    ctx.active_paginator = handle
    ctx.logger.debug("Paginated %d items into %d page(s)", len(handle.state.items), handle.total_pages)
    return handle


def clear_pagination(ctx: AppContext, mounts: Sequence[PaginationMount]) -> None:
    """Drop the active paginator and empty every mount."""
    if ctx.active_paginator is not None:
        ctx.active_paginator.dispose()
        ctx.active_paginator = None
    for m in mounts:
        ctx.events.unbind_all(m.element.find_all("a"))
        m.element.clear()
