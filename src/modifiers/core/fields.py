"""Field naming helpers."""
from __future__ import annotations

# The field holding modifiers on a host entity.
MODIFIERS_FIELD = "field_modifiers"

_PREFIXES = ("field_mod_", "field_")


def shorten_field_name(name: str) -> str:
    """Strip the storage prefix from a field machine name.

    ``field_mod_`` wins over the plain ``field_`` prefix; unprefixed names are
    returned unchanged.

    Examples:
        >>> shorten_field_name("field_mod_color")
        'color'
        >>> shorten_field_name("field_image")
        'image'
        >>> shorten_field_name("title")
        'title'
    """
    for prefix in _PREFIXES:
        if name.startswith(prefix):
            return name[len(prefix):]
    return name


__all__ = ["MODIFIERS_FIELD", "shorten_field_name"]
