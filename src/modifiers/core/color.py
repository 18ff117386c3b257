"""Hexadecimal color + opacity to RGBA conversion.

Color fields store a hex color and a separate opacity. Modifier plugins
consume a single CSS ``rgba(...)`` string instead, so extraction converts
every color item through :func:`encode_color`.
"""
from __future__ import annotations

import re
from typing import Any

_HEX_PATTERN = re.compile(r"[0-9A-F]{6}", re.IGNORECASE)
_NUMERIC_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def coerce_opacity(opacity: Any) -> float:
    """Coerce an opacity value to float.

    Strings are read up to the longest numeric prefix; anything without one
    (including ``None``) becomes ``0.0``.

    Examples:
        >>> coerce_opacity("0.5")
        0.5
        >>> coerce_opacity("1abc")
        1.0
        >>> coerce_opacity("abc")
        0.0
    """
    if isinstance(opacity, bool):
        return float(opacity)
    if isinstance(opacity, (int, float)):
        return float(opacity)
    if opacity is None:
        return 0.0
    match = _NUMERIC_PREFIX.match(str(opacity))
    if not match:
        return 0.0
    try:
        return float(match.group(0))
    except ValueError:
        return 0.0


def format_opacity(value: float) -> str:
    """Render an opacity the way CSS authors write it (``1`` not ``1.0``)."""
    if value != value or value in (float("inf"), float("-inf")):
        return "0"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def encode_color(color: Any, opacity: Any) -> str:
    """Return ``rgba(r,g,b,opacity)`` for a hex color, or ``""`` if invalid.

    Accepts ``#rrggbb``, ``rrggbb`` and the 3-digit shorthand, case
    insensitive, with surrounding whitespace.

    Examples:
        >>> encode_color("#f00", "0.5")
        'rgba(255,0,0,0.5)'
        >>> encode_color("zzz", "1")
        ''
    """
    hex_value = str(color if color is not None else "").strip()
    if hex_value.startswith("#"):
        hex_value = hex_value[1:]
    if len(hex_value) == 3:
        hex_value = "".join(ch * 2 for ch in hex_value)
    if not _HEX_PATTERN.fullmatch(hex_value):
        return ""

    red, green, blue = (int(hex_value[i:i + 2], 16) for i in (0, 2, 4))
    return f"rgba({red},{green},{blue},{format_opacity(coerce_opacity(opacity))})"


__all__ = ["coerce_opacity", "encode_color", "format_opacity"]
