"""Tests for mapping table assembly."""
from __future__ import annotations

from modifiers.core.extraction.mappings import (
    DEFAULT_MAPPINGS,
    build_mappings,
    candidates_for,
    merge_mappings,
)


def test_defaults_are_copied() -> None:
    table = build_mappings()
    table["media"]["image"].append("field_extra")

    assert "field_extra" not in DEFAULT_MAPPINGS["media"]["image"]


def test_mapping_override_replaces_bundle_list() -> None:
    table = build_mappings([{"media": {"image": ["field_hero_image"]}}])

    assert table["media"]["image"] == ["field_hero_image"]
    assert table["media"]["audio"] == ["field_media_audio_file"]


def test_override_adds_new_types() -> None:
    table = build_mappings([{"block_content": {"banner": ["field_banner"]}}])

    assert candidates_for(table, "block_content", "banner") == ["field_banner"]


def test_callable_hooks_mutate_in_order() -> None:
    def drop_taxonomy(table):
        table.pop("taxonomy_term")

    def add_audio_fallback(table):
        table["media"]["audio"].append("field_file")

    table = build_mappings([drop_taxonomy, add_audio_fallback])

    assert "taxonomy_term" not in table
    assert table["media"]["audio"] == ["field_media_audio_file", "field_file"]


def test_later_alterations_win() -> None:
    table = build_mappings([
        {"media": {"image": ["first"]}},
        {"media": {"image": ["second"]}},
    ])

    assert table["media"]["image"] == ["second"]


def test_explicit_defaults() -> None:
    table = build_mappings(defaults={"media": {"image": ["only"]}})

    assert table == {"media": {"image": ["only"]}}


def test_candidates_for_missing_entries() -> None:
    assert candidates_for(DEFAULT_MAPPINGS, "media", "nope") is None
    assert candidates_for(DEFAULT_MAPPINGS, "nope", "image") is None


def test_merge_mappings_in_place() -> None:
    table = {"media": {"image": ["a"]}}

    result = merge_mappings(table, {"media": {"video": ["b"]}})

    assert result is table
    assert table == {"media": {"image": ["a"], "video": ["b"]}}
