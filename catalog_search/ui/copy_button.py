# catalog_search/ui/copy_button.py
"""
CopyButtons — `.copy-btn[data-coords]` copies its coordinates to the clipboard.

The Qt clipboard is tried first; if it is unavailable or raises, the text is
handed to a manual select-and-copy fallback. Either way the button flashes a
check mark with the `copied` class, restored after settings.flash_ms when a
Qt event loop is running, or on restore().
"""

from __future__ import annotations

from typing import Callable, List, Optional

from bs4 import Tag
from PyQt5.QtCore import QCoreApplication, QTimer

from ..app import AppContext
from .. import constants
from ..utils.dom import add_class, closest, remove_class


def qt_clipboard_write(text: str) -> None:
    from PyQt5.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        raise RuntimeError("no Qt GUI application; clipboard unavailable")
    app.clipboard().setText(text)


class SelectionFallback:
    """
    Manual copy path: put the text into a textarea, select it, hand the
    selection to `sink` and remove the textarea again.
    """

    def __init__(self, ctx: AppContext, sink: Optional[Callable[[str], None]] = None):
        self.ctx = ctx
        self.sink = sink
        self.selections: List[str] = []

    def __call__(self, text: str) -> None:
        doc = self.ctx.document
        ta = doc.new_tag("textarea")
        ta.string = text
        (doc.body or doc).append(ta)
        try:
            selected = ta.get_text()
            self.selections.append(selected)
            if self.sink is not None:
                self.sink(selected)
        finally:
            ta.decompose()


class CopyButtons:
    def __init__(self, ctx: AppContext,
                 writer: Callable[[str], None] = qt_clipboard_write,
                 fallback: Optional[Callable[[str], None]] = None):
        self.ctx = ctx
        self.writer = writer
        self.fallback = fallback or SelectionFallback(ctx)
        self._originals: dict[int, str] = {}

    def bind(self) -> None:
        # delegated, so buttons injected with search results are covered too
        self.ctx.events.delegate(self.on_click)

    def on_click(self, target: Optional[Tag]) -> bool:
        """Delegated click: copy if target sits inside a copy button."""
        btn = closest(target, constants.COPY_BUTTON_CLASS)
        return self.copy(btn) if btn is not None else False

    def copy(self, btn: Tag) -> bool:
        """Copy btn's data-coords. Returns False if the button has none."""
        coords = btn.get(constants.COPY_ATTR)
        if not coords:
            return False
        try:
            self.writer(coords)
        except Exception as e:
            self.ctx.logger.error("Failed to copy: %s", e)
            try:
                self.fallback(coords)
            except Exception as fe:
                self.ctx.logger.warning("Manual copy fallback failed: %s", fe)
        self._flash(btn)
        self.ctx.bus.copied.emit(coords)
        return True

    def restore(self, btn: Tag) -> None:
        original = self._originals.pop(id(btn), None)
        if original is None:
            return
        btn.string = original
        remove_class(btn, constants.COPIED_CLASS)

    # ---- internals ----

    def _flash(self, btn: Tag) -> None:
        self._originals.setdefault(id(btn), btn.get_text())
        btn.string = constants.COPIED_MARK
        add_class(btn, constants.COPIED_CLASS)

        if QCoreApplication.instance() is not None:
            QTimer.singleShot(self.ctx.settings.flash_ms, lambda b=btn: self.restore(b))
