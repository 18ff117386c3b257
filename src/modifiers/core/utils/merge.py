"""Dictionary and list merge helpers.

Two merge flavours are used in this package:

- :func:`deep_merge` layers configuration sources. Dicts merge recursively,
  everything else (lists included) is replaced by the higher layer.
- :func:`unique_extend` unions value lists while keeping the first-seen order,
  as attribute merging needs.
"""
from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, List, Mapping


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries without mutating inputs.

    Example:
        >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
        >>> deep_merge({"a": [1, 2]}, {"a": [3]})
        {'a': [3]}
    """
    result: Dict[str, Any] = copy.deepcopy(dict(base))
    for key, value in (override or {}).items():
        if isinstance(result.get(key), Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def unique_extend(existing: Iterable[Any], incoming: Iterable[Any]) -> List[Any]:
    """Concatenate two sequences and drop repeated values.

    Order is first-seen: values of ``existing`` keep their positions and new
    values from ``incoming`` are appended. Equality, not hashing, decides
    duplicates so unhashable values (dicts, lists) are supported.

    Example:
        >>> unique_extend([2, 3], [1, 2])
        [2, 3, 1]
    """
    result: List[Any] = []
    for value in [*existing, *incoming]:
        if value not in result:
            result.append(value)
    return result


__all__ = ["deep_merge", "unique_extend"]
