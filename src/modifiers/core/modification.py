"""The output of one modifier plugin invocation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

# media -> selector -> ["property:value", ...]
CssTree = Dict[str, Dict[str, List[str]]]
# media -> selector -> attribute -> scalar | list
AttributeTree = Dict[str, Dict[str, Dict[str, Any]]]


@dataclass(frozen=True)
class Modification:
    """CSS, libraries, settings, attributes and head links for one config.

    Attributes:
        css: Media query -> selector -> CSS declarations
        libraries: Client-side library references to attach
        settings: Opaque payload handed to client-side code (or None)
        attributes: Media query -> selector -> HTML attributes
        links: Head ``<link>`` attribute maps
    """

    css: CssTree = field(default_factory=dict)
    libraries: List[str] = field(default_factory=list)
    settings: Optional[Any] = None
    attributes: AttributeTree = field(default_factory=dict)
    links: List[Dict[str, str]] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.css or self.libraries or self.settings or self.attributes or self.links)

    def __bool__(self) -> bool:
        return not self.is_empty()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Modification":
        return cls(
            css={media: {sel: list(props) for sel, props in rules.items()} for media, rules in (data.get("css") or {}).items()},
            libraries=list(data.get("libraries") or []),
            settings=data.get("settings"),
            attributes={media: {sel: dict(attrs) for sel, attrs in rules.items()} for media, rules in (data.get("attributes") or {}).items()},
            links=[dict(link) for link in data.get("links") or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "css": self.css,
            "libraries": list(self.libraries),
            "settings": self.settings,
            "attributes": self.attributes,
            "links": [dict(link) for link in self.links],
        }


__all__ = ["AttributeTree", "CssTree", "Modification"]
