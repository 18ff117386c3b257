from __future__ import annotations

from typing import Any, Mapping, Optional

from modifiers.core.modification import Modification
from ._base import first_value, media_of


class FontModifier:
    """Font family, optionally loaded from a remote stylesheet."""

    plugin_id = "font_modifier"

    @staticmethod
    def modification(selector: str, config: Mapping[str, Any]) -> Optional[Modification]:
        font = first_value(config.get("font"))
        if not font:
            return None
        url = first_value(config.get("font_url"))
        links = [{"rel": "stylesheet", "href": str(url)}] if url else []
        return Modification(
            css={media_of(config): {selector: [f"font-family:{font}"]}},
            links=links,
        )
