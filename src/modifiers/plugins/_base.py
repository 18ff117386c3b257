"""Helpers shared by the bundled plugins."""
from __future__ import annotations

from typing import Any, List, Mapping

from modifiers.core.aggregation.css import ALL_MEDIA


def media_of(config: Mapping[str, Any]) -> str:
    """Media query a config applies to (``all`` when unset)."""
    media = first_value(config.get("media"))
    return str(media) if media else ALL_MEDIA


def first_value(value: Any) -> Any:
    """Collapse a multi-value config entry to its first item."""
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [v for v in value if v not in (None, "")]
    return [value]
