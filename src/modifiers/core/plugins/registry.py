"""Registry of modifier plugin factories.

Plugins are registered under a string id with a factory (usually the plugin
class itself). Plugins can be added explicitly, with the ``register``
decorator, from an imported module, or from ``*.py`` files on disk:

    registry = ModifierRegistry()

    @registry.register("bg_color_modifier")
    class BgColorModifier:
        @staticmethod
        def modification(selector, config):
            ...
"""
from __future__ import annotations

import importlib
import importlib.util
import inspect
import logging
import pkgutil
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..exceptions import PluginNotFoundError, PluginRegistrationError
from .contracts import ModifierPlugin

logger = logging.getLogger(__name__)

PluginFactory = Callable[[], Any]

BUNDLED_PLUGINS_PACKAGE = "modifiers.plugins"


def _has_modification(obj: Any) -> bool:
    return callable(getattr(obj, "modification", None))


class ModifierRegistry:
    """Maps plugin ids to factories producing modifier plugins."""

    def __init__(self) -> None:
        self._factories: Dict[str, PluginFactory] = {}

    def register(self, plugin_id: str) -> Callable[[PluginFactory], PluginFactory]:
        """Decorator registering a plugin class or factory under ``plugin_id``."""
        def decorator(factory: PluginFactory) -> PluginFactory:
            self.add(plugin_id, factory)
            return factory
        return decorator

    def add(self, plugin_id: str, factory: PluginFactory) -> None:
        """Register ``factory``; a later registration replaces an earlier one."""
        if not plugin_id:
            raise PluginRegistrationError("Plugin id must not be empty")
        if not callable(factory):
            raise PluginRegistrationError(
                f"Factory for '{plugin_id}' is not callable",
                context={"plugin_id": plugin_id},
            )
        if inspect.isclass(factory) and not _has_modification(factory):
            raise PluginRegistrationError(
                f"Plugin '{plugin_id}' does not define modification(selector, config)",
                context={"plugin_id": plugin_id, "factory": factory.__name__},
            )
        if plugin_id in self._factories:
            logger.debug("Plugin '%s' re-registered", plugin_id)
        self._factories[plugin_id] = factory

    def has_definition(self, plugin_id: str) -> bool:
        return plugin_id in self._factories

    def __contains__(self, plugin_id: str) -> bool:
        return self.has_definition(plugin_id)

    def list_ids(self) -> List[str]:
        """List registered plugin ids in registration order."""
        return list(self._factories.keys())

    def create_instance(self, plugin_id: str) -> ModifierPlugin:
        """Instantiate the plugin registered under ``plugin_id``."""
        factory = self._factories.get(plugin_id)
        if factory is None:
            raise PluginNotFoundError(plugin_id)
        plugin = factory()
        if not _has_modification(plugin):
            raise PluginRegistrationError(
                f"Factory for '{plugin_id}' produced an object without modification()",
                context={"plugin_id": plugin_id},
            )
        return plugin

    def load_from_module(self, module: ModuleType) -> int:
        """Register every plugin class defined in ``module``.

        A plugin class carries a string ``plugin_id`` and a callable
        ``modification``. Returns the number of plugins registered.
        """
        count = 0
        for name, obj in vars(module).items():
            if name.startswith("_") or not inspect.isclass(obj):
                continue
            if getattr(obj, "__module__", None) != module.__name__:
                continue
            plugin_id = getattr(obj, "plugin_id", None)
            if isinstance(plugin_id, str) and plugin_id and _has_modification(obj):
                self.add(plugin_id, obj)
                count += 1
        return count

    def load_from_paths(self, dirs: Iterable[Path], namespace: str = "modifiers.dynamic") -> int:
        """Import ``*.py`` files from ``dirs`` (in order) and register their plugins.

        Files starting with ``_`` are skipped. A file that fails to import is
        logged and skipped; later directories override earlier ones.
        """
        total = 0
        for directory in dirs:
            directory = Path(directory)
            if not directory.is_dir():
                continue
            for path in sorted(directory.glob("*.py")):
                if path.name.startswith("_"):
                    continue
                module = _load_module_from_path(path, namespace)
                if module is not None:
                    total += self.load_from_module(module)
        return total


def _load_module_from_path(path: Path, namespace: str) -> Optional[ModuleType]:
    module_name = f"{namespace}.{path.stem}"
    try:
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            logger.warning("Cannot create module spec for %s", path)
            return None
        module = importlib.util.module_from_spec(spec)
        # Registered before exec so dataclasses in plugin files resolve their module.
        sys.modules[module_name] = module
        spec.loader.exec_module(module)  # type: ignore[attr-defined]
        return module
    except Exception as e:
        sys.modules.pop(module_name, None)
        logger.warning("Failed to load plugin module %s: %s", path, e)
    return None


def default_registry() -> ModifierRegistry:
    """Return a new registry holding the bundled plugins."""
    registry = ModifierRegistry()
    package = importlib.import_module(BUNDLED_PLUGINS_PACKAGE)
    for info in sorted(pkgutil.iter_modules(package.__path__), key=lambda i: i.name):
        if info.name.startswith("_"):
            continue
        module = importlib.import_module(f"{BUNDLED_PLUGINS_PACKAGE}.{info.name}")
        registry.load_from_module(module)
    return registry


__all__ = ["BUNDLED_PLUGINS_PACKAGE", "ModifierRegistry", "PluginFactory", "default_registry"]
