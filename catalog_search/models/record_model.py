# catalog_search/models/record_model.py
"""
Record models for catalog-search — the typed index built from a listing.

- PluginRecord: one plugin listing item, with its markup kept for re-display
- SingleGuide / MultiGuide: the two shapes a guide entry can take
- RecordIndex: a simple read-only container with helpers
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Iterator, Sequence, Union


@dataclass(slots=True)
class PluginRecord:
    name: Optional[str]                  # text of .name, None if absent
    description: Optional[str] = None
    owner: Optional[str] = None
    labels: List[str] = field(default_factory=list)
    source_url: Optional[str] = None     # href of h3.name > a
    framework_versions: List[str] = field(default_factory=list)   # e.g. "5.3.1"
    rendered_markup: str = ""            # inner HTML of the listing item


@dataclass(slots=True)
class VersionVariant:
    framework_version: Optional[str]
    href: Optional[str]
    tags: List[str] = field(default_factory=list)


@dataclass(slots=True)
class SingleGuide:
    href: Optional[str]
    title: Optional[str]
    tags: List[str] = field(default_factory=list)


@dataclass(slots=True)
class MultiGuide:
    title: Optional[str]
    versions: List[VersionVariant] = field(default_factory=list)


GuideRecord = Union[SingleGuide, MultiGuide]
Record = Union[PluginRecord, SingleGuide, MultiGuide]


@dataclass(slots=True)
class RecordIndex:
    """Records in extraction order. Built once, never mutated afterwards."""
    kind: str
    records: Sequence[Record] = ()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def titles(self) -> List[str]:
        out = []
        for r in self.records:
            title = r.name if isinstance(r, PluginRecord) else r.title
            out.append(title or "")
        return out

    def framework_majors(self) -> List[str]:
        """Distinct major versions across plugin records, numerically sorted."""
        majors = set()
        for r in self.records:
            if isinstance(r, PluginRecord):
                for v in r.framework_versions:
                    head = v.split(".", 1)[0]
                    if head:
                        majors.add(head)
        return sorted(majors, key=lambda m: (not m.isdigit(), int(m) if m.isdigit() else 0, m))
