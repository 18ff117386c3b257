"""Run modifier plugins over their configs."""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping

from ..modification import Modification
from .registry import ModifierRegistry

logger = logging.getLogger(__name__)


class ModifierDispatcher:
    """Invoke registered plugins for a ``{plugin_id: [config, ...]}`` map."""

    def __init__(self, registry: ModifierRegistry) -> None:
        self.registry = registry

    def process(
        self,
        modifications: List[Modification],
        modifiers: Mapping[str, Iterable[Mapping[str, Any]]],
        selector: str,
    ) -> None:
        """Append the modifications produced for ``selector`` to ``modifications``.

        Plugin types are visited in mapping order and configs in list order.
        Each plugin is instantiated once per call; unknown types and empty
        config lists are skipped, falsy plugin results are dropped.
        """
        for plugin_id, configs in modifiers.items():
            if not configs:
                continue
            if not self.registry.has_definition(plugin_id):
                logger.debug("No modifier plugin registered for '%s'; skipped", plugin_id)
                continue

            plugin = self.registry.create_instance(plugin_id)
            for config in configs:
                modification = plugin.modification(selector, config)
                if modification:
                    modifications.append(modification)

    def dispatch(
        self,
        modifiers: Mapping[str, Iterable[Mapping[str, Any]]],
        selector: str,
    ) -> List[Modification]:
        modifications: List[Modification] = []
        self.process(modifications, modifiers, selector)
        return modifications


__all__ = ["ModifierDispatcher"]
