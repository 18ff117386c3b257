"""Tests for the in-memory entity graph."""
from __future__ import annotations

from pathlib import Path

import pytest

from modifiers.core.entity import (
    FieldableEntity,
    FileEntity,
    InMemoryEntity,
    InMemoryFile,
    entity_from_dict,
    field_from_dict,
    load_entity_yaml,
)
from modifiers.core.entity.protocols import FieldHandle
from modifiers.core.exceptions import EntityDataError


class TestFieldFromDict:
    def test_scalar_value_is_wrapped_in_main_property(self) -> None:
        field = field_from_dict("field_mod_padding", {"type": "string", "value": "1rem"})

        assert field.get_value() == [{"value": "1rem"}]
        assert field.storage.type == "string"
        assert field.storage.is_multiple is False
        assert field.is_reference() is False
        assert isinstance(field, FieldHandle)

    def test_missing_items_is_empty(self) -> None:
        field = field_from_dict("field_mod_padding", {"type": "string"})

        assert field.is_empty()

    def test_reference_field_builds_targets(self) -> None:
        field = field_from_dict("field_media", {
            "type": "entity_reference",
            "multiple": True,
            "references": [{"type": "media", "bundle": "image"}, {"type": "media", "bundle": "audio"}],
        })

        assert field.is_reference()
        assert field.storage.main_property_name == "target_id"
        assert [e.bundle for e in field.referenced_entities()] == ["image", "audio"]
        assert field.get_value() == [{"target_id": 0}, {"target_id": 1}]

    def test_image_type_is_reference_by_default(self) -> None:
        field = field_from_dict("field_media_image", {"type": "image", "references": [{"url": "/a.png"}]})

        (file,) = field.referenced_entities()
        assert isinstance(file, FileEntity)
        assert file.file_url() == "/a.png"

    def test_get_value_returns_copies(self) -> None:
        field = field_from_dict("f", {"items": [{"value": 1}]})
        field.get_value()[0]["value"] = 2

        assert field.get_value() == [{"value": 1}]

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(EntityDataError):
            field_from_dict("f", ["not", "a", "mapping"])  # type: ignore[arg-type]


class TestEntityFromDict:
    def test_entity_is_fieldable(self) -> None:
        entity = entity_from_dict({"type": "node", "bundle": "page", "fields": {"title": {"value": "Hi"}}})

        assert isinstance(entity, InMemoryEntity)
        assert isinstance(entity, FieldableEntity)
        assert entity.has_field("title")
        assert not entity.has_field("body")
        assert list(entity.get_fields()) == ["title"]

    def test_url_makes_file_entity(self) -> None:
        file = entity_from_dict({"url": "/files/a.jpg"})

        assert isinstance(file, InMemoryFile)
        assert not isinstance(file, FieldableEntity)
        assert file.type_id == "file"

    def test_type_and_bundle_required(self) -> None:
        with pytest.raises(EntityDataError) as excinfo:
            entity_from_dict({"type": "node"})

        assert excinfo.value.context["keys"] == ["type"]


def test_load_entity_yaml(fixtures_root: Path) -> None:
    entity = load_entity_yaml(fixtures_root / "hero_node.yaml")

    assert isinstance(entity, InMemoryEntity)
    assert entity.bundle == "landing_page"
    modifiers = entity.get("field_modifiers")
    assert len(modifiers.referenced_entities()) == 6
    assert entity.get("title").storage.is_base_field is True


def test_load_empty_yaml_rejected(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    with pytest.raises(EntityDataError):
        load_entity_yaml(path)
