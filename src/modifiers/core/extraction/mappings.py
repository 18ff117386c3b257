"""Mapping table from referenced entity type/bundle to value-bearing fields.

A reference field on a modifier set usually points at a media item or a
taxonomy term, not at a value. The mapping table names, per entity type and
bundle, which fields of the referenced entity hold "the" value, in priority
order.

The table is assembled once per extractor from the defaults (bundled config)
and a sequence of alterations. An alteration is either a mapping merged at
bundle level (an override replaces the candidate list of every bundle it
names) or a callable receiving the table to mutate in place.
"""
from __future__ import annotations

import copy
import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Union

logger = logging.getLogger(__name__)

MappingTable = Dict[str, Dict[str, List[str]]]
MappingHook = Callable[[MappingTable], None]
MappingAlteration = Union[Mapping[str, Mapping[str, List[str]]], MappingHook]

DEFAULT_MAPPINGS: Mapping[str, Mapping[str, List[str]]] = {
    "media": {
        "audio": ["field_media_audio_file"],
        "file": ["field_media_file"],
        "image": ["field_media_image", "image", "field_file"],
        "remote_video": ["field_media_oembed_video"],
        "video": [
            "field_media_video_file",
            "field_media_video_embed_field",
            "field_file",
        ],
        "video_embed": ["field_media_video_embed_field", "field_file"],
    },
    "taxonomy_term": {
        "modifiers_color": ["field_mod_color"],
    },
}


def merge_mappings(table: MappingTable, override: Mapping[str, Mapping[str, List[str]]]) -> MappingTable:
    """Merge ``override`` into ``table`` in place; override wins per bundle."""
    for type_id, bundles in override.items():
        target = table.setdefault(str(type_id), {})
        for bundle, candidates in (bundles or {}).items():
            target[str(bundle)] = [str(name) for name in candidates or []]
    return table


def build_mappings(
    alterations: Iterable[MappingAlteration] = (),
    *,
    defaults: Optional[Mapping[str, Mapping[str, List[str]]]] = None,
) -> MappingTable:
    """Assemble the mapping table from defaults plus alterations, in order."""
    table: MappingTable = copy.deepcopy(dict(DEFAULT_MAPPINGS if defaults is None else defaults))
    for alteration in alterations:
        if callable(alteration):
            alteration(table)
        else:
            merge_mappings(table, alteration)
    logger.debug(
        "Mapping table assembled for %d entity types",
        len(table),
    )
    return table


def candidates_for(table: Mapping[str, Mapping[str, List[str]]], type_id: str, bundle: str) -> Optional[List[str]]:
    """Return candidate field names for an entity type and bundle, if mapped."""
    return (table.get(type_id) or {}).get(bundle)


__all__ = [
    "DEFAULT_MAPPINGS",
    "MappingAlteration",
    "MappingHook",
    "MappingTable",
    "build_mappings",
    "candidates_for",
    "merge_mappings",
]
