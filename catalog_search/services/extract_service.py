# catalog_search/services/extract_service.py
"""
ExtractService — reads a pre-rendered listing once into typed records.

Plugin items are `ul > li.plugin` under the listing container; guides are
`.guide` anchors and `.multi-guide` blocks anywhere in the document.

Sub-fields are located by class; anything missing degrades to None or an
empty list, so a malformed item still yields a record. The source markup
is only read, never modified.
"""

from __future__ import annotations

from typing import List

from bs4 import Tag

from ..app import AppContext
from .. import constants
from ..models.record_model import (
    PluginRecord, SingleGuide, MultiGuide, VersionVariant, GuideRecord, RecordIndex,
)
from ..utils.dom import (
    text_of, first_text, all_texts, attr_of, direct_children, inner_html,
)


class ExtractService:
    def __init__(self, ctx: AppContext):
        self.ctx = ctx

    # ---- Public API ------------------------------------------------------

    def build_index(self, kind: str) -> RecordIndex:
        if kind == constants.PLUGINS:
            records = self.extract_plugins(self.ctx.document)
        elif kind == constants.GUIDES:
            records = self.extract_guides(self.ctx.document)
        else:
            raise ValueError(f"Unknown record kind: {kind!r}")
        self.ctx.logger.info("Indexed %d %s", len(records), kind)
        return RecordIndex(kind=kind, records=tuple(records))

    def extract_plugins(self, container: Tag) -> List[PluginRecord]:
        items = container.select(constants.PLUGIN_ITEM_SELECTOR)
        return [self._plugin_from_item(li) for li in items]

    def extract_guides(self, document: Tag) -> List[GuideRecord]:
        guides: List[GuideRecord] = []
        for a in document.find_all(class_=constants.GUIDE_CLASS):
            guides.append(SingleGuide(
                href=attr_of(a, "href"),
                title=text_of(a),
                tags=self._tags_at(a.parent),
            ))
        for block in document.find_all(class_=constants.MULTI_GUIDE_CLASS):
            guides.append(MultiGuide(
                title=self._multi_guide_title(block),
                versions=self._multi_guide_versions(block),
            ))
        return guides

    # ---- Internals -------------------------------------------------------

    def _plugin_from_item(self, li: Tag) -> PluginRecord:
        name = first_text(li, constants.PLUGIN_NAME_SELECTOR)
        if name is None:
            self.ctx.logger.debug("Plugin item without a name element")
        versions = [v for v in all_texts(li, constants.VERSION_BADGE_SELECTOR) if v]
        return PluginRecord(
            name=name,
            description=first_text(li, constants.PLUGIN_DESC_SELECTOR),
            owner=first_text(li, constants.PLUGIN_OWNER_SELECTOR),
            labels=all_texts(li, constants.PLUGIN_LABEL_SELECTOR),
            source_url=attr_of(li.select_one(constants.PLUGIN_SOURCE_LINK_SELECTOR), "href"),
            framework_versions=versions,
            rendered_markup=inner_html(li),
        )

    def _tags_at(self, parent: Tag | None) -> List[str]:
        if parent is None:
            return []
        return [text_of(t)
                for t in direct_children(parent, constants.GUIDE_TAG_CLASS)]

    def _multi_guide_title(self, block: Tag) -> str:
        titles = direct_children(block, constants.GUIDE_TITLE_CLASS)
        return text_of(titles[0]) if titles else ""

    def _multi_guide_versions(self, block: Tag) -> List[VersionVariant]:
        versions: List[VersionVariant] = []
        for div in direct_children(block, constants.GUIDE_VERSION_BLOCK_CLASS):
            links = direct_children(div, constants.GUIDE_VERSION_LINK_CLASS)
            link = links[-1] if links else None
            versions.append(VersionVariant(
                framework_version=text_of(link),
                href=attr_of(link, "href"),
                tags=self._tags_at(div),
            ))
        return versions
