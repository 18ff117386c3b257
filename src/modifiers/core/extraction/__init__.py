"""Entity-to-config extraction.

This module provides:
- mappings: type/bundle to candidate field table and its alterations
- resolver: ValueResolver for simple, color and reference fields
- extractor: EntityConfigExtractor producing short-keyed config trees
"""
from .extractor import EntityConfigExtractor
from .mappings import DEFAULT_MAPPINGS, build_mappings, merge_mappings
from .resolver import ValueResolver

__all__ = [
    "DEFAULT_MAPPINGS",
    "EntityConfigExtractor",
    "ValueResolver",
    "build_mappings",
    "merge_mappings",
]
