"""Modifiers service.

Single entry point tying the engines together:

    service = Modifiers()
    result = service.modify(entity, selector="#hero", build_id="hero", sink=attachments)

``modify`` extracts the config of the entity's modifiers field, treats every
bundle found under it as a plugin id, runs the plugins for ``selector`` and
aggregates their modifications into ``sink``.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .aggregation.aggregator import AggregationResult, ModificationAggregator
from .aggregation.sink import AttachmentSink
from .color import encode_color
from .config import ModifiersConfig
from .entity.protocols import EntityHandle, FieldHandle, FieldStorage
from .extraction.extractor import EntityConfigExtractor
from .extraction.mappings import MappingAlteration
from .extraction.resolver import ValueResolver
from .fields import shorten_field_name
from .modification import Modification
from .plugins.dispatcher import ModifierDispatcher
from .plugins.registry import ModifierRegistry, default_registry

logger = logging.getLogger(__name__)


class Modifiers:
    """Extract modifier configs from entities and apply plugin output.

    Args:
        registry: Plugin registry (bundled plugins when omitted)
        config: Loaded configuration (bundled defaults + env when omitted)
        mapping_hooks: Mapping table alterations applied after the configured
            table, in order
    """

    def __init__(
        self,
        registry: Optional[ModifierRegistry] = None,
        config: Optional[ModifiersConfig] = None,
        mapping_hooks: Iterable[MappingAlteration] = (),
    ) -> None:
        self.config = config or ModifiersConfig()
        self.registry = registry if registry is not None else default_registry()
        self.resolver = ValueResolver(
            color_types=self.config.color_types,
            file_types=self.config.file_types,
        )
        self.extractor = EntityConfigExtractor(
            self.resolver,
            mappings=self.config.mappings,
            alterations=list(mapping_hooks),
        )
        self.dispatcher = ModifierDispatcher(self.registry)
        self.aggregator = ModificationAggregator(self.config.attachments)

    @property
    def mappings(self) -> Dict[str, Dict[str, List[str]]]:
        return self.extractor.mappings

    # ----- Extraction -----
    def extract_entity_config(
        self,
        entity: EntityHandle,
        field_name: Optional[str] = None,
        config: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        return self.extractor.extract_entity(entity, field_name or self.config.field_name, config)

    def extract_field_config(self, field: FieldHandle, config: Dict[str, Any]) -> None:
        self.extractor.extract_field(field, config)

    def get_simple_value(self, field: FieldHandle, storage: FieldStorage) -> Any:
        return self.resolver.resolve_simple(field, storage)

    def get_referenced_value(self, field: FieldHandle, storage: FieldStorage) -> Any:
        return self.resolver.resolve_reference(field, storage, self.mappings)

    def get_color_value(self, color: Any, opacity: Any) -> str:
        return encode_color(color, opacity)

    def get_short_field(self, name: str) -> str:
        return shorten_field_name(name)

    # ----- Plugins and aggregation -----
    def process(
        self,
        modifications: List[Modification],
        modifiers: Mapping[str, Iterable[Mapping[str, Any]]],
        selector: str,
    ) -> None:
        self.dispatcher.process(modifications, modifiers, selector)

    def apply(
        self,
        modifications: Iterable[Modification],
        build_id: str,
        sink: Optional[AttachmentSink] = None,
    ) -> AggregationResult:
        return self.aggregator.apply(modifications, build_id, sink)

    def modify(
        self,
        entity: EntityHandle,
        selector: str,
        build_id: str,
        sink: Optional[AttachmentSink] = None,
        field_name: Optional[str] = None,
    ) -> AggregationResult:
        """Run extraction, plugins and aggregation for one element."""
        name = field_name or self.config.field_name
        config = self.extract_entity_config(entity, name)
        modifiers = config.get(shorten_field_name(name))
        if not isinstance(modifiers, Mapping):
            logger.debug("Entity %s:%s has no modifier sets in '%s'", entity.type_id, entity.bundle, name)
            modifiers = {}

        modifications: List[Modification] = []
        self.process(modifications, modifiers, selector)
        return self.apply(modifications, build_id, sink)


__all__ = ["Modifiers"]
