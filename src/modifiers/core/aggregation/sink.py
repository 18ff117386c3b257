"""Render sink interface and an in-memory implementation.

Page assembly is outside this package. An aggregation result is handed to an
:class:`AttachmentSink`, which receives opaque attachment records: library
references, namespaced settings and keyed head tags.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence, runtime_checkable


@dataclass(frozen=True)
class HeadTag:
    """An HTML tag to place in the document head.

    Attributes:
        tag: Tag name ("style" or "link")
        attributes: Tag attributes
        key: Stable identifier; sinks may overwrite earlier tags by key
        value: Tag content (CSS text for style tags)
        weight: Ordering weight within the head
    """

    tag: str
    attributes: Dict[str, str]
    key: str
    value: Optional[str] = None
    weight: int = 10

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "tag": self.tag,
            "attributes": dict(self.attributes),
            "key": self.key,
            "weight": self.weight,
        }
        if self.value is not None:
            data["value"] = self.value
        return data


@runtime_checkable
class AttachmentSink(Protocol):
    """Receiver of aggregation output for one render target."""

    def add_library(self, library: str) -> None:
        ...

    def add_setting(self, path: Sequence[str], value: Any) -> None:
        """Store ``value`` under a nested settings ``path``."""
        ...

    def add_head_tag(self, tag: HeadTag) -> None:
        ...


@dataclass
class RenderAttachments:
    """Collects attachments in memory, in the order they were added.

    Libraries and head tags are recorded as given, duplicates included;
    deduplication is left to whoever renders the page.
    """

    libraries: List[str] = field(default_factory=list)
    settings: Dict[str, Any] = field(default_factory=dict)
    head: List[HeadTag] = field(default_factory=list)

    def add_library(self, library: str) -> None:
        self.libraries.append(library)

    def add_setting(self, path: Sequence[str], value: Any) -> None:
        if not path:
            raise ValueError("Settings path must not be empty")
        cursor = self.settings
        for part in path[:-1]:
            cursor = cursor.setdefault(part, {})
        cursor[path[-1]] = value

    def add_head_tag(self, tag: HeadTag) -> None:
        self.head.append(tag)

    def head_by_key(self) -> Dict[str, HeadTag]:
        """Head tags keyed by their key; later tags win."""
        return {tag.key: tag for tag in self.head}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "library": list(self.libraries),
            "settings": self.settings,
            "html_head": [tag.to_dict() for tag in self.head],
        }


__all__ = ["AttachmentSink", "HeadTag", "RenderAttachments"]
