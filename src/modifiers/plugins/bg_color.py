from __future__ import annotations

from typing import Any, Mapping, Optional

from modifiers.core.modification import Modification
from ._base import first_value, media_of


class BgColorModifier:
    """Background color from an ``rgba()`` or any CSS color value."""

    plugin_id = "bg_color_modifier"

    @staticmethod
    def modification(selector: str, config: Mapping[str, Any]) -> Optional[Modification]:
        color = first_value(config.get("bg_color"))
        if not color:
            return None
        return Modification(css={media_of(config): {selector: [f"background-color:{color}"]}})
