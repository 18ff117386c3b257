"""CSS rendering for modification style trees."""
from __future__ import annotations

from typing import Iterable, Mapping

ALL_MEDIA = "all"


def render_css(styles: Mapping[str, Mapping[str, Iterable[str]]]) -> str:
    """Render a media -> selector -> declarations tree into CSS text.

    Keys are emitted in insertion order. Media other than ``all`` wrap their
    rules in ``@media``; a space separates the keyword from queries not
    starting with ``(``. Declarations are joined with ``;`` without a trailing
    separator. Nothing is escaped or minified.

    Example:
        >>> render_css({"all": {".a": ["color:red"]}, "print": {".b": ["display:none"]}})
        '.a{color:red}@media print{.b{display:none}}'
    """
    parts = []
    for media, rules in styles.items():
        wrapped = media != ALL_MEDIA
        if wrapped:
            parts.append("@media" + ("" if media.startswith("(") else " ") + media + "{")
        for selector, properties in rules.items():
            parts.append(selector + "{" + ";".join(properties) + "}")
        if wrapped:
            parts.append("}")
    return "".join(parts)


__all__ = ["ALL_MEDIA", "render_css"]
