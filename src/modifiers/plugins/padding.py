from __future__ import annotations

from typing import Any, Mapping, Optional

from modifiers.core.modification import Modification
from ._base import first_value, media_of


class PaddingModifier:
    plugin_id = "padding_modifier"

    @staticmethod
    def modification(selector: str, config: Mapping[str, Any]) -> Optional[Modification]:
        padding = first_value(config.get("padding"))
        if padding in (None, ""):
            return None
        return Modification(css={media_of(config): {selector: [f"padding:{padding}"]}})
