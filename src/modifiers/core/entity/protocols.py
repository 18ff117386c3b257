"""Protocols for the content entities modifiers read from.

The entity storage and field type system live outside this package. These
protocols describe the small surface extraction relies on, so any storage
layer (ORM rows, API payloads, the in-memory graph in ``memory.py``) can be
adapted to it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Protocol, runtime_checkable


@dataclass(frozen=True)
class FieldStorage:
    """Storage definition of a field.

    Attributes:
        type: Field type id ("string", "color", "entity_reference", "image"...)
        main_property_name: Item property holding the field's main value
        is_multiple: Whether the field accepts more than one item
        is_base_field: Whether the field is a base/system field of the entity
    """

    type: str
    main_property_name: str = "value"
    is_multiple: bool = False
    is_base_field: bool = False


@runtime_checkable
class EntityHandle(Protocol):
    """Protocol for anything a reference field can point at."""

    @property
    def type_id(self) -> str:
        """Entity type id, e.g. "media" or "taxonomy_term"."""
        ...

    @property
    def bundle(self) -> str:
        """Bundle (sub-type) of the entity, e.g. "image"."""
        ...


@runtime_checkable
class FieldHandle(Protocol):
    """Protocol for the values of one field on one entity."""

    @property
    def name(self) -> str:
        """Field machine name."""
        ...

    @property
    def storage(self) -> FieldStorage:
        """Field storage definition."""
        ...

    def is_empty(self) -> bool:
        ...

    def get_value(self) -> List[Dict[str, Any]]:
        """Return the raw items, one property dict per item."""
        ...

    def is_reference(self) -> bool:
        ...

    def referenced_entities(self) -> List[EntityHandle]:
        """Return referenced entities (empty for non-reference fields)."""
        ...


@runtime_checkable
class FieldableEntity(EntityHandle, Protocol):
    """Protocol for entities that hold fields."""

    def has_field(self, name: str) -> bool:
        ...

    def get(self, name: str) -> FieldHandle:
        ...

    def get_fields(self) -> Mapping[str, FieldHandle]:
        """Return all fields keyed by name, in declaration order."""
        ...


@runtime_checkable
class FileEntity(EntityHandle, Protocol):
    """Protocol for file entities referenced by file and image fields."""

    def file_url(self) -> str:
        """Return the public URL of the file."""
        ...


__all__ = [
    "EntityHandle",
    "FieldHandle",
    "FieldStorage",
    "FieldableEntity",
    "FileEntity",
]
