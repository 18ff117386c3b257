"""Bundled modifier plugins.

Each module exposes one plugin class carrying a ``plugin_id`` and a static
``modification(selector, config)`` method. They are registered into
:func:`modifiers.core.plugins.registry.default_registry`.
"""
