"""
Modifiers - presentation modifications for content entities

Modifiers extracts plugin configuration from content entities, runs the
configured modifier plugins and merges their CSS, attributes, settings and
head links into a single render output per element.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
