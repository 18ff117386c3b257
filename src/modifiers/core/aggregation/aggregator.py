"""Modification aggregation.

Merges the modifications collected for one render target (one ``build_id``)
into final CSS text, library list, settings entries, a merged attribute tree
and head links, then hands them to an attachment sink.
"""
from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..config import AttachmentSettings
from ..modification import AttributeTree, Modification
from .attributes import merge_attributes
from .css import render_css
from .sink import AttachmentSink, HeadTag

logger = logging.getLogger(__name__)


def link_key(link: Mapping[str, str]) -> str:
    """Stable content hash of a link attribute map."""
    canonical = json.dumps(dict(link), sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.md5(canonical.encode("utf-8")).hexdigest()


def _has_payload(settings: Any) -> bool:
    if settings is None:
        return False
    if isinstance(settings, (Mapping, list, tuple, str)):
        return bool(settings)
    return True


@dataclass
class AggregationResult:
    """Everything the modifications of one render target contribute."""

    build_id: str
    css: str = ""
    libraries: List[str] = field(default_factory=list)
    settings: List[Any] = field(default_factory=list)
    attributes: AttributeTree = field(default_factory=dict)
    links: List[Dict[str, str]] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.css or self.libraries or self.settings or self.attributes or self.links)

    def head_tags(self, options: Optional[AttachmentSettings] = None) -> List[HeadTag]:
        """Link tags in submission order, followed by the style tag if any."""
        opts = options or AttachmentSettings()
        tags = [
            HeadTag(
                tag="link",
                attributes=dict(link),
                key=opts.link_key_prefix + link_key(link),
                weight=opts.weight,
            )
            for link in self.links
        ]
        if self.css:
            tags.append(
                HeadTag(
                    tag="style",
                    attributes={"media": opts.style_media, "data-modifiers": self.build_id},
                    key=opts.css_key_prefix + self.build_id,
                    value=self.css,
                    weight=opts.weight,
                )
            )
        return tags

    def attach(self, sink: AttachmentSink, options: Optional[AttachmentSettings] = None) -> None:
        """Hand libraries, settings and head tags to ``sink``."""
        opts = options or AttachmentSettings()
        for library in self.libraries:
            sink.add_library(library)
        if self.settings:
            sink.add_setting([opts.namespace, "settings", self.build_id], list(self.settings))
        if self.attributes:
            sink.add_setting([opts.namespace, "attributes", self.build_id], self.attributes)
        for tag in self.head_tags(opts):
            sink.add_head_tag(tag)


class ModificationAggregator:
    """Merge ordered modifications into one :class:`AggregationResult`."""

    def __init__(self, options: Optional[AttachmentSettings] = None) -> None:
        self.options = options or AttachmentSettings()

    def aggregate(self, modifications: Iterable[Modification], build_id: str) -> AggregationResult:
        result = AggregationResult(build_id=build_id)
        css_parts: List[str] = []

        for modification in modifications:
            if modification.css:
                css_parts.append(render_css(modification.css))
            result.libraries.extend(modification.libraries)
            if _has_payload(modification.settings):
                result.settings.append(modification.settings)
            if modification.attributes:
                merge_attributes(result.attributes, modification.attributes)
            result.links.extend(dict(link) for link in modification.links)

        result.css = "".join(css_parts)
        logger.debug(
            "Aggregated %s: css=%d chars, libraries=%d, settings=%d, links=%d",
            build_id,
            len(result.css),
            len(result.libraries),
            len(result.settings),
            len(result.links),
        )
        return result

    def apply(
        self,
        modifications: Iterable[Modification],
        build_id: str,
        sink: Optional[AttachmentSink] = None,
    ) -> AggregationResult:
        """Aggregate and, when a sink is given, attach the result to it."""
        result = self.aggregate(modifications, build_id)
        if sink is not None:
            result.attach(sink, self.options)
        return result


__all__ = ["AggregationResult", "ModificationAggregator", "link_key"]
