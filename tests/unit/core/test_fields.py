from __future__ import annotations

import pytest

from modifiers.core.fields import MODIFIERS_FIELD, shorten_field_name


@pytest.mark.parametrize(
    "name,expected",
    [
        ("field_mod_color", "color"),
        ("field_image", "image"),
        ("title", "title"),
        ("field_modifiers", "modifiers"),
        ("field_mod_", ""),
        ("my_field_color", "my_field_color"),
    ],
)
def test_shorten_field_name(name: str, expected: str) -> None:
    assert shorten_field_name(name) == expected


def test_modifiers_field_default() -> None:
    assert MODIFIERS_FIELD == "field_modifiers"
