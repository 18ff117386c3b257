"""Field value resolution.

Turns a field's raw items into the scalar or list of scalars modifier plugins
consume. Color fields become ``rgba()`` strings; reference fields are bridged
through the mapping table to a value-bearing field of each referenced entity.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional

from ..color import encode_color
from ..entity.protocols import FieldableEntity, FieldHandle, FieldStorage, FileEntity
from .mappings import candidates_for

logger = logging.getLogger(__name__)

DEFAULT_COLOR_TYPES = frozenset({"color", "color_field_type"})
DEFAULT_FILE_TYPES = frozenset({"file", "image"})


class ValueResolver:
    """Extract plugin-facing values from entity fields.

    Args:
        color_types: Storage types holding ``color``/``opacity`` items
        file_types: Storage types referencing file entities
    """

    def __init__(
        self,
        color_types: Iterable[str] = DEFAULT_COLOR_TYPES,
        file_types: Iterable[str] = DEFAULT_FILE_TYPES,
    ) -> None:
        self.color_types = frozenset(color_types)
        self.file_types = frozenset(file_types)

    def resolve_simple(self, field: FieldHandle, storage: FieldStorage) -> Any:
        """Return the field's value(s), or None if the field is empty."""
        if field.is_empty():
            return None

        if storage.type in self.color_types:
            values = self._color_values(field)
        else:
            values = self._main_values(field, storage)
        return self._collapse(values, storage)

    def resolve_reference(
        self,
        field: FieldHandle,
        storage: FieldStorage,
        mappings: Mapping[str, Mapping[str, List[str]]],
    ) -> Any:
        """Return values of the mapped fields of all referenced entities.

        For every referenced entity the first candidate field (in mapping
        order) that exists and is non-empty supplies the values. Entities
        without a mapping or without such a field contribute nothing. Values
        are flattened across entities before the single/multiple collapse,
        which follows the outer field's storage.
        """
        if field.is_empty():
            return None

        values: List[Any] = []
        for entity in field.referenced_entities():
            candidates = candidates_for(mappings, entity.type_id, entity.bundle)
            if candidates is None or not isinstance(entity, FieldableEntity):
                logger.debug("No mapping for %s:%s; skipped", entity.type_id, entity.bundle)
                continue

            mapped = self._first_filled(entity, candidates)
            if mapped is None:
                logger.debug(
                    "No filled candidate field on %s:%s (candidates=%s)",
                    entity.type_id,
                    entity.bundle,
                    candidates,
                )
                continue
            values.extend(self._mapped_values(mapped))

        if not values:
            return None
        return self._collapse(values, storage)

    # ----- Helpers -----
    def _first_filled(self, entity: FieldableEntity, candidates: Iterable[str]) -> Optional[FieldHandle]:
        for name in candidates:
            if entity.has_field(name) and not entity.get(name).is_empty():
                return entity.get(name)
        return None

    def _mapped_values(self, field: FieldHandle) -> List[Any]:
        storage = field.storage
        if storage.type in self.color_types:
            return self._color_values(field)
        if storage.type in self.file_types:
            urls: List[Any] = []
            for file in field.referenced_entities():
                if isinstance(file, FileEntity):
                    urls.append(file.file_url())
                else:
                    logger.debug("Referenced %s:%s is not a file; skipped", file.type_id, file.bundle)
            return urls
        return self._main_values(field, storage)

    def _color_values(self, field: FieldHandle) -> List[str]:
        return [encode_color(item.get("color"), item.get("opacity")) for item in field.get_value()]

    def _main_values(self, field: FieldHandle, storage: FieldStorage) -> List[Any]:
        return [item.get(storage.main_property_name) for item in field.get_value()]

    def _collapse(self, values: List[Any], storage: FieldStorage) -> Any:
        if storage.is_multiple:
            return values
        return values[0] if values else None


__all__ = ["DEFAULT_COLOR_TYPES", "DEFAULT_FILE_TYPES", "ValueResolver"]
