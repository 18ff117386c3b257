from __future__ import annotations

from typing import Any, Mapping, Optional

from modifiers.core.modification import Modification
from ._base import first_value, media_of

LIBRARY = "modifiers/bg_video"


class BgVideoModifier:
    """Background video played by a client-side library."""

    plugin_id = "bg_video_modifier"

    @staticmethod
    def modification(selector: str, config: Mapping[str, Any]) -> Optional[Modification]:
        video = first_value(config.get("video"))
        if not video:
            return None
        media = media_of(config)
        return Modification(
            css={media: {selector: ["position:relative", "overflow:hidden"]}},
            libraries=[LIBRARY],
            settings={"selector": selector, "media": media, "video": video},
        )
