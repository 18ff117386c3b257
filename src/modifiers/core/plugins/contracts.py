from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from ..modification import Modification


@runtime_checkable
class ModifierPlugin(Protocol):
    """
    Minimal stable plugin contract for modifiers.
    Plugin classes expose a ``plugin_id`` and a pure static ``modification``.
    """
    plugin_id: str

    @staticmethod
    def modification(selector: str, config: Mapping[str, Any]) -> Optional[Modification]:
        ...
