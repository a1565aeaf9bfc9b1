# catalog_search/services/markup_service.py
"""
MarkupService — serialize matched records back into list markup.

- Plugins: the retained item markup is reinjected verbatim
- Guides: rebuilt from fields; multi-guides keep only the variants that matched
- Heading text summarizing the active filters

Pure string functions; nothing here touches a document.
"""

from __future__ import annotations

from html import escape
from typing import Iterable, List, Sequence

from .. import constants
from ..models.record_model import MultiGuide, PluginRecord
from .filter_service import tag_match, title_match


def render_plugins(plugins: Iterable[PluginRecord]) -> str:
    items = "".join(render_plugin_item(p) for p in plugins)
    return f'<ul class="{constants.PLUGIN_LIST_CLASS}">{items}</ul>'


def render_plugin_item(plugin: PluginRecord) -> str:
    return f'<li class="{constants.PLUGIN_ITEM_CLASS}">{plugin.rendered_markup}</li>'


def render_guide_group(guides: Sequence, query: str) -> str:
    items = "".join(render_guide_item(g, query) for g in guides)
    return (
        '<div class="guide-group">'
        '<div class="guide-group-header">'
        f"<h2>Guides Filtered by: {escape(query)}</h2>"
        "</div>"
        f"<ul>{items}</ul>"
        "</div>"
    )


def render_guide_item(guide, query: str) -> str:
    if isinstance(guide, MultiGuide):
        title_matched = title_match(guide.title, query)
        versions = "".join(
            '<div class="align-left">'
            f'<a class="grails-version" href="{escape(v.href or "")}">{escape(v.framework_version or "")}</a>'
            f"{_hidden_tags(v.tags)}"
            "</div>"
            for v in guide.versions
            if title_matched or tag_match(v.tags, query)
        )
        return (
            "<li>"
            '<div class="multi-guide">'
            f'<span class="title">{escape(guide.title or "")}</span>'
            f"{versions}"
            "</div>"
            "</li>"
        )
    return (
        "<li>"
        f'<a class="{constants.GUIDE_CLASS}" href="{escape(guide.href or "")}">{escape(guide.title or "")}</a>'
        f"{_hidden_tags(guide.tags)}"
        "</li>"
    )


def filter_summary(query: str, facet: str, framework_label: str) -> str:
    """'"query" + Label N.x' with whichever parts are active."""
    parts: List[str] = []
    if query:
        parts.append(f'"{query}"')
    if facet:
        parts.append(f"{framework_label} {facet}.x")
    return " + ".join(parts)


def _hidden_tags(tags: Iterable[str]) -> str:
    return "".join(
        f'<span style="display: none" class="{constants.GUIDE_TAG_CLASS}">{escape(t)}</span>'
        for t in tags
    )
