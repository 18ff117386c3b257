"""
Modifiers configuration management (YAML layers validated by JSON schema).
"""
from __future__ import annotations

import copy
import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterator, List, Mapping, Optional, Tuple

import jsonschema
import yaml

from modifiers.data import read_json, read_yaml
from .exceptions import ConfigError
from .utils.merge import deep_merge

logger = logging.getLogger(__name__)

ENV_PREFIX = "MODIFIERS_"
CONFIG_PATH_ENV = "MODIFIERS_CONFIG"


@dataclass(frozen=True)
class AttachmentSettings:
    """How aggregation results are keyed when handed to a render sink."""

    namespace: str = "modifiers"
    weight: int = 10
    style_media: str = "all"
    css_key_prefix: str = "modifications_css_"
    link_key_prefix: str = "modifications_links_"


class ModifiersConfig:
    """Load, merge, and validate modifiers configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: MODIFIERS_<section>__<key>
    2. Explicit ``overrides`` mapping
    3. YAML file given as ``config_path`` (or via MODIFIERS_CONFIG)
    4. Bundled defaults: modifiers.data/config/defaults.yaml

    Dicts merge recursively; lists replace the lower layer entirely.
    """

    def __init__(
        self,
        overrides: Optional[Mapping[str, Any]] = None,
        *,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._environ: Mapping[str, str] = os.environ if environ is None else environ
        env_path = self._environ.get(CONFIG_PATH_ENV)
        if config_path is None and env_path:
            config_path = Path(env_path)
        self.config_path = Path(config_path) if config_path is not None else None
        self.data: Dict[str, Any] = self._load(overrides or {})

    # ----- Loading -----
    def _load(self, overrides: Mapping[str, Any]) -> Dict[str, Any]:
        cfg = deep_merge({}, read_yaml("config", "defaults.yaml"))
        if self.config_path is not None:
            cfg = deep_merge(cfg, self.load_yaml(self.config_path))
        cfg = deep_merge(cfg, overrides)
        self.apply_env_overrides(cfg)
        self.validate(cfg)
        return cfg

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}", context={"path": str(path)})
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}", context={"path": str(path)}) from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {path} must contain a mapping",
                context={"path": str(path), "got": type(data).__name__},
            )
        return data

    def validate(self, cfg: Mapping[str, Any]) -> None:
        schema = read_json("schemas", "config.schema.json")
        validator = jsonschema.Draft7Validator(schema)
        errors = sorted(validator.iter_errors(cfg), key=lambda e: list(e.absolute_path))
        if errors:
            messages = [
                f"{'/'.join(str(p) for p in err.absolute_path) or '<root>'}: {err.message}"
                for err in errors
            ]
            raise ConfigError(
                "Invalid modifiers configuration: " + "; ".join(messages),
                context={"errors": messages},
            )

    # ----- Environment overrides -----
    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(self._environ.keys()):
            if not key.startswith(ENV_PREFIX) or key == CONFIG_PATH_ENV:
                continue
            segments = key[len(ENV_PREFIX):].split("__")
            if not all(segments):
                logger.warning("Ignoring malformed config env var %s", key)
                continue
            yield [s.lower() for s in segments], self._coerce_type(self._environ[key])

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, value in self._iter_env_overrides():
            cursor = cfg
            for part in path[:-1]:
                if not isinstance(cursor.get(part), dict):
                    cursor[part] = {}
                cursor = cursor[part]
            cursor[path[-1]] = value
            logger.debug("Config override from environment: %s", ".".join(path))

    # ----- Accessors -----
    def get(self, dotted: str, default: Any = None) -> Any:
        """Return a value by dotted path, e.g. ``get("attachments.weight")``."""
        cursor: Any = self.data
        for part in dotted.split("."):
            if not isinstance(cursor, Mapping) or part not in cursor:
                return default
            cursor = cursor[part]
        return cursor

    @property
    def field_name(self) -> str:
        return str(self.data["field_name"])

    @property
    def mappings(self) -> Dict[str, Dict[str, List[str]]]:
        """Copy of the configured mapping table (safe to mutate)."""
        return copy.deepcopy(self.data.get("mappings") or {})

    @property
    def color_types(self) -> FrozenSet[str]:
        return frozenset(self.data["fields"]["color_types"])

    @property
    def file_types(self) -> FrozenSet[str]:
        return frozenset(self.data["fields"]["file_types"])

    @property
    def attachments(self) -> AttachmentSettings:
        section = self.data["attachments"]
        return AttachmentSettings(
            namespace=section["namespace"],
            weight=int(section["weight"]),
            style_media=section["style_media"],
            css_key_prefix=section["css_key_prefix"],
            link_key_prefix=section["link_key_prefix"],
        )

    @property
    def log_level(self) -> str:
        return str(self.get("logging.level", "WARNING"))

    @property
    def log_path(self) -> Optional[Path]:
        raw = self.get("logging.path")
        return Path(raw) if raw else None


__all__ = ["AttachmentSettings", "ModifiersConfig", "CONFIG_PATH_ENV", "ENV_PREFIX"]
