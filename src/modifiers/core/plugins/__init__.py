"""Modifier plugin registry and dispatch."""
from .contracts import ModifierPlugin
from .dispatcher import ModifierDispatcher
from .registry import ModifierRegistry, default_registry

__all__ = ["ModifierDispatcher", "ModifierPlugin", "ModifierRegistry", "default_registry"]
