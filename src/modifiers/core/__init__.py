"""Core engines: entity config extraction and modification aggregation.

This module provides:
- entity: protocols for the entity graph and an in-memory implementation
- extraction: ValueResolver and EntityConfigExtractor
- aggregation: ModificationAggregator, CSS rendering, attribute merging
- plugins: ModifierRegistry and ModifierDispatcher
- service: the Modifiers facade running the whole pipeline
"""
from .modification import Modification
from .service import Modifiers

__all__ = ["Modification", "Modifiers"]
