"""Attribute tree merging."""
from __future__ import annotations

from typing import Any, Dict, Mapping

from ..utils.merge import unique_extend


def merge_attributes(
    target: Dict[str, Dict[str, Dict[str, Any]]],
    incoming: Mapping[str, Mapping[str, Mapping[str, Any]]],
) -> Dict[str, Dict[str, Dict[str, Any]]]:
    """Merge a media -> selector -> attribute tree into ``target`` in place.

    List values are unioned with an existing list (first-seen order, existing
    values first); a non-list target is replaced by the deduplicated incoming
    list. Scalar values are only written when the target has no value yet, so
    the first plugin deciding an attribute keeps it.

    Returns ``target`` for chaining.
    """
    for media, selectors in incoming.items():
        for selector, attributes in selectors.items():
            slot = target.setdefault(media, {}).setdefault(selector, {})
            for key, value in attributes.items():
                current = slot.get(key)
                if isinstance(value, (list, tuple)):
                    base = current if isinstance(current, list) else []
                    slot[key] = unique_extend(base, value)
                elif current is None:
                    slot[key] = value
    return target


__all__ = ["merge_attributes"]
