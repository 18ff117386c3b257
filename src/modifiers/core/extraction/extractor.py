"""Entity-to-config extraction.

Produces the plugin-facing configuration tree of an entity: short field keys
mapping to scalars, lists, or (for reference fields) bundle-keyed lists of
nested configs, one per referenced entity.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from ..entity.protocols import EntityHandle, FieldableEntity, FieldHandle
from ..fields import MODIFIERS_FIELD, shorten_field_name
from .mappings import MappingAlteration, MappingTable, build_mappings
from .resolver import ValueResolver

logger = logging.getLogger(__name__)


class EntityConfigExtractor:
    """Walk entity fields into a flat, short-keyed config tree.

    Referenced entities are walked exactly one hop deep per call; nesting
    beyond that is driven by the caller through repeated calls.
    """

    def __init__(
        self,
        resolver: Optional[ValueResolver] = None,
        *,
        mappings: Optional[Mapping[str, Mapping[str, list]]] = None,
        alterations: Iterable[MappingAlteration] = (),
    ) -> None:
        self.resolver = resolver or ValueResolver()
        self.mappings: MappingTable = build_mappings(alterations, defaults=mappings)

    def extract_entity(
        self,
        entity: EntityHandle,
        field_name: str = MODIFIERS_FIELD,
        config: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Return ``config`` extended with the values of ``field_name``.

        The input mapping is never mutated. Simple fields are only filled when
        their short key is not populated yet. Reference fields add one nested
        config per referenced entity under its bundle, skipping every bundle
        already present in the incoming config, so repeated calls with the
        same config do not duplicate entries.
        """
        result: Dict[str, Any] = dict(config or {})
        if not isinstance(entity, FieldableEntity) or not entity.has_field(field_name):
            return result

        field = entity.get(field_name)
        short = shorten_field_name(field_name)

        if not field.is_reference():
            if short not in result:
                result[short] = self.resolver.resolve_simple(field, field.storage)
            return result

        existing = result.get(short)
        if existing and not isinstance(existing, Mapping):
            logger.debug("Key '%s' already holds a simple value; reference skipped", short)
            return result

        section: Dict[str, Any] = dict(existing or {})
        processed_bundles = set(section)

        for referenced in field.referenced_entities():
            bundle = referenced.bundle
            if bundle in processed_bundles:
                continue
            nested: Dict[str, Any] = {}
            if isinstance(referenced, FieldableEntity):
                for referenced_field in referenced.get_fields().values():
                    self.extract_field(referenced_field, nested)
            section[bundle] = [*section.get(bundle, []), nested]

        if section:
            result[short] = section
        return result

    def extract_field(self, field: FieldHandle, config: Dict[str, Any]) -> None:
        """Set ``config[short_name]`` from one field, skipping base fields."""
        storage = field.storage
        if storage.is_base_field:
            return

        if field.is_reference():
            value = self.resolver.resolve_reference(field, storage, self.mappings)
        else:
            value = self.resolver.resolve_simple(field, storage)
        config[shorten_field_name(field.name)] = value


__all__ = ["EntityConfigExtractor"]
