"""In-memory entity graph.

Plain-data implementations of the entity protocols. They are used to feed
extraction from YAML/JSON payloads (see :func:`load_entity_yaml`) and as the
fixtures of the test suite.

Data shape accepted by :func:`entity_from_dict`::

    type: paragraph
    bundle: bg_color_modifier
    fields:
      field_mod_color:
        type: color
        items:
          - {color: "#ff0000", opacity: "0.5"}
      field_media:
        type: entity_reference
        multiple: true
        references:
          - type: media
            bundle: image
            fields: {...}

Entities with a ``url`` key become :class:`InMemoryFile` objects. Scalar items
are wrapped into ``{main_property: value}``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from ..exceptions import EntityDataError
from .protocols import EntityHandle, FieldStorage

# Field types that reference other entities when no explicit flag is given.
REFERENCE_FIELD_TYPES = frozenset({
    "entity_reference",
    "entity_reference_revisions",
    "file",
    "image",
})


@dataclass
class InMemoryFile:
    """A file entity with a public URL."""

    url: str
    bundle: str = "file"
    type_id: str = "file"

    def file_url(self) -> str:
        return self.url


@dataclass
class InMemoryField:
    """Values of one field on one in-memory entity."""

    name: str
    storage: FieldStorage
    items: List[Dict[str, Any]] = field(default_factory=list)
    references: Optional[List[EntityHandle]] = None

    def is_empty(self) -> bool:
        return not self.items

    def get_value(self) -> List[Dict[str, Any]]:
        return [dict(item) for item in self.items]

    def is_reference(self) -> bool:
        return self.references is not None

    def referenced_entities(self) -> List[EntityHandle]:
        return list(self.references or [])


@dataclass
class InMemoryEntity:
    """A fieldable entity backed by a dict of fields."""

    type_id: str
    bundle: str
    fields: Dict[str, InMemoryField] = field(default_factory=dict)

    def has_field(self, name: str) -> bool:
        return name in self.fields

    def get(self, name: str) -> InMemoryField:
        return self.fields[name]

    def get_fields(self) -> Mapping[str, InMemoryField]:
        return dict(self.fields)

    def add_field(self, item: InMemoryField) -> "InMemoryEntity":
        self.fields[item.name] = item
        return self


def field_from_dict(name: str, data: Mapping[str, Any]) -> InMemoryField:
    """Build an :class:`InMemoryField` from its plain-data description."""
    if not isinstance(data, Mapping):
        raise EntityDataError(
            f"Field '{name}' must be a mapping",
            context={"field": name, "got": type(data).__name__},
        )
    field_type = str(data.get("type", "string"))
    raw_refs = data.get("references")
    is_reference = bool(data.get("reference", raw_refs is not None or field_type in REFERENCE_FIELD_TYPES))
    default_property = "target_id" if is_reference else "value"
    storage = FieldStorage(
        type=field_type,
        main_property_name=str(data.get("main_property", default_property)),
        is_multiple=bool(data.get("multiple", False)),
        is_base_field=bool(data.get("base", False)),
    )

    references: Optional[List[EntityHandle]] = None
    if is_reference:
        references = [entity_from_dict(ref) for ref in (raw_refs or [])]

    raw_items = data.get("items")
    if raw_items is None:
        if references is not None:
            raw_items = [{"target_id": index} for index, _ in enumerate(references)]
        elif "value" in data:
            raw_items = [data["value"]]
        else:
            raw_items = []
    if not isinstance(raw_items, list):
        raw_items = [raw_items]

    items = [
        dict(item) if isinstance(item, Mapping) else {storage.main_property_name: item}
        for item in raw_items
    ]
    return InMemoryField(name=name, storage=storage, items=items, references=references)


def entity_from_dict(data: Mapping[str, Any]) -> Union[InMemoryEntity, InMemoryFile]:
    """Build an entity (or file) graph from nested plain data."""
    if not isinstance(data, Mapping):
        raise EntityDataError(
            "Entity data must be a mapping",
            context={"got": type(data).__name__},
        )
    if "url" in data:
        return InMemoryFile(
            url=str(data["url"]),
            bundle=str(data.get("bundle", "file")),
            type_id=str(data.get("type", "file")),
        )
    if "type" not in data or "bundle" not in data:
        raise EntityDataError(
            "Entity data requires 'type' and 'bundle'",
            context={"keys": sorted(str(k) for k in data.keys())},
        )

    entity = InMemoryEntity(type_id=str(data["type"]), bundle=str(data["bundle"]))
    for name, field_data in (data.get("fields") or {}).items():
        entity.add_field(field_from_dict(str(name), field_data))
    return entity


def load_entity_yaml(path: Path) -> Union[InMemoryEntity, InMemoryFile]:
    """Read an entity graph from a YAML file."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        raise EntityDataError(f"Empty entity file: {path}", context={"path": str(path)})
    return entity_from_dict(data)


__all__ = [
    "REFERENCE_FIELD_TYPES",
    "InMemoryEntity",
    "InMemoryField",
    "InMemoryFile",
    "entity_from_dict",
    "field_from_dict",
    "load_entity_yaml",
]
