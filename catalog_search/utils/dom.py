# catalog_search/utils/dom.py
"""
Lightweight DOM helpers for catalog-search.

BeautifulSoup-based utilities to:
- Read text/attributes with None for anything missing
- Add/remove/toggle CSS classes and inline display
- Replace an element's inner HTML with a parsed fragment
- Bind click handlers to rendered elements (ClickRegistry)
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

_DISPLAY_RX = re.compile(r"\s*display\s*:\s*[^;]*;?", re.I)

# ------------------------- reading ------------------------------------------

def text_of(tag: Optional[Tag]) -> Optional[str]:
    """Whitespace-collapsed text content of tag, or None when the tag is missing."""
    if tag is None:
        return None
    return " ".join(tag.get_text().split())

def first_text(root: Tag, selector: str) -> Optional[str]:
    return text_of(root.select_one(selector))

def all_texts(root: Tag, selector: str) -> list[str]:
    return [text_of(t) for t in root.select(selector)]

def attr_of(tag: Optional[Tag], name: str) -> Optional[str]:
    if tag is None:
        return None
    value = tag.get(name)
    if isinstance(value, list):
        return " ".join(value)
    return value

def direct_children(tag: Tag, class_name: str) -> list[Tag]:
    return [c for c in tag.find_all(recursive=False) if has_class(c, class_name)]

# ------------------------- classes ------------------------------------------

def has_class(tag: Tag, class_name: str) -> bool:
    return class_name in (tag.get("class") or [])

def add_class(tag: Tag, class_name: str) -> None:
    classes = list(tag.get("class") or [])
    if class_name not in classes:
        classes.append(class_name)
    tag["class"] = classes

def remove_class(tag: Tag, class_name: str) -> None:
    classes = [c for c in (tag.get("class") or []) if c != class_name]
    if classes:
        tag["class"] = classes
    elif tag.has_attr("class"):
        del tag["class"]

def toggle_class(tag: Tag, class_name: str, force: Optional[bool] = None) -> bool:
    """Flip class_name (or set it to `force`). Returns True if now present."""
    on = (not has_class(tag, class_name)) if force is None else force
    if on:
        add_class(tag, class_name)
    else:
        remove_class(tag, class_name)
    return on

# ------------------------- display ------------------------------------------

def set_display(tag: Tag, value: str) -> None:
    """Replace any inline display declaration with `display: value`."""
    style = _DISPLAY_RX.sub("", tag.get("style") or "").strip()
    decl = f"display: {value}"
    tag["style"] = f"{style}; {decl}" if style else decl

def display_of(tag: Tag) -> Optional[str]:
    m = re.search(r"display\s*:\s*([^;]+)", tag.get("style") or "", re.I)
    return m.group(1).strip() if m else None

# ------------------------- markup -------------------------------------------

def inner_html(tag: Tag) -> str:
    return tag.decode_contents()

def set_inner_html(tag: Tag, html: str) -> None:
    """Replace tag's children with the nodes parsed from html."""
    tag.clear()
    if not html:
        return
    fragment = BeautifulSoup(html, "html.parser")
    for node in list(fragment.contents):
        tag.append(node.extract())

def closest(tag: Optional[Tag], class_name: str) -> Optional[Tag]:
    """tag itself or its nearest ancestor carrying class_name."""
    node = tag
    while node is not None and isinstance(node, Tag):
        if has_class(node, class_name):
            return node
        node = node.parent
    return None

# ------------------------- click dispatch -----------------------------------

class ClickRegistry:
    """
    Click handlers bound to concrete elements, plus document-level delegates.

    Keys are element identities, not markup, so two identical links in a top
    and a bottom container keep separate handlers. Unbinding an element makes
    later clicks on it a no-op.

    Delegates see every click, whatever the target, so elements injected
    after load (search results) still reach them.
    """

    def __init__(self):
        self._handlers: Dict[int, Tuple[Tag, Callable[[], None]]] = {}
        self._delegates: List[Callable[[Tag], Any]] = []

    def bind(self, tag: Tag, handler: Callable[[], None]) -> None:
        self._handlers[id(tag)] = (tag, handler)

    def unbind(self, tag: Tag) -> None:
        self._handlers.pop(id(tag), None)

    def unbind_all(self, tags: Iterable[Tag]) -> None:
        for t in tags:
            self.unbind(t)

    def is_bound(self, tag: Tag) -> bool:
        entry = self._handlers.get(id(tag))
        return entry is not None and entry[0] is tag

    def delegate(self, handler: Callable[[Tag], Any]) -> None:
        """Register handler(target) to run on every click."""
        self._delegates.append(handler)

    def click(self, tag: Tag) -> bool:
        """
        Run the handler bound to tag, then every delegate.
        Returns True if the bound handler ran or a delegate reported handling it.
        """
        handled = False
        entry = self._handlers.get(id(tag))
        if entry is not None and entry[0] is tag:
            entry[1]()
            handled = True
        for d in list(self._delegates):
            if d(tag):
                handled = True
        return handled
