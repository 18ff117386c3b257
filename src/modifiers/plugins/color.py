from __future__ import annotations

from typing import Any, Mapping, Optional

from modifiers.core.modification import Modification
from ._base import first_value, media_of


class ColorModifier:
    """Text color of the element and its links."""

    plugin_id = "color_modifier"

    @staticmethod
    def modification(selector: str, config: Mapping[str, Any]) -> Optional[Modification]:
        color = first_value(config.get("color"))
        if not color:
            return None
        return Modification(css={
            media_of(config): {
                selector: [f"color:{color}"],
                f"{selector} a": [f"color:{color}"],
            },
        })
