"""Entity interfaces and the in-memory entity graph."""
from .memory import (
    InMemoryEntity,
    InMemoryField,
    InMemoryFile,
    entity_from_dict,
    field_from_dict,
    load_entity_yaml,
)
from .protocols import EntityHandle, FieldHandle, FieldStorage, FieldableEntity, FileEntity

__all__ = [
    "EntityHandle",
    "FieldHandle",
    "FieldStorage",
    "FieldableEntity",
    "FileEntity",
    "InMemoryEntity",
    "InMemoryField",
    "InMemoryFile",
    "entity_from_dict",
    "field_from_dict",
    "load_entity_yaml",
]
