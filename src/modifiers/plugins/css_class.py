from __future__ import annotations

from typing import Any, Mapping, Optional

from modifiers.core.modification import Modification
from ._base import as_list, media_of


class ClassModifier:
    """Extra HTML classes, applied client-side per media query."""

    plugin_id = "class_modifier"

    @staticmethod
    def modification(selector: str, config: Mapping[str, Any]) -> Optional[Modification]:
        classes = []
        for value in as_list(config.get("classes")):
            classes.extend(str(value).split())
        if not classes:
            return None
        return Modification(attributes={media_of(config): {selector: {"class": classes}}})
