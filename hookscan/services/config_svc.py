#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from built-in defaults, a YAML file and env vars
#  - Caches composed config for the lifetime of the process
# ======================================================================

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from hookscan.components.analysis.aggregation_comp import DEFAULT_TOP_LIMIT
from hookscan.helpers.exceptions import ConfigError

# Looked up in the working directory when no explicit path is given
DEFAULT_CONFIG_FILENAME = "hookscan.yaml"

CONFIG_PATH_ENV = "HOOKSCAN_CONFIG"

# Environment overrides: env var -> (config key, converter)
ENV_OVERRIDES: dict[str, tuple[str, type]] = {
    "HOOKSCAN_LOG_LEVEL": ("log_level", str),
    "HOOKSCAN_TOP_LIMIT": ("top_limit", int),
}

DEFAULT_CONFIG: dict[str, Any] = {
    "exclude_dirs": [],  # added to node_modules, dist and build
    "extra_patterns": [],
    "top_limit": DEFAULT_TOP_LIMIT,
    "log_level": "WARNING",
}


class ConfigService:
    """
    Service for loading and caching hookscan configuration.

    Sources, later ones winning:
      1) Built-in defaults
      2) YAML file: explicit path, else $HOOKSCAN_CONFIG, else ./hookscan.yaml
      3) Environment variables (HOOKSCAN_LOG_LEVEL, HOOKSCAN_TOP_LIMIT)
    """

    def __init__(self, config_path: str | Path | None = None) -> None:
        """Initialize ConfigService with empty cache."""
        self._config_path = config_path
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict

        Raises:
            ConfigError: If a value has the wrong type
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> ConfigService().get("top_limit")
            10
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def _compose(self) -> dict[str, Any]:
        config = copy.deepcopy(DEFAULT_CONFIG)

        yaml_path = self._resolve_yaml_path()
        if yaml_path is not None:
            self._deep_merge(config, self._load_yaml(yaml_path))

        for env_name, (key, convert) in ENV_OVERRIDES.items():
            raw = os.environ.get(env_name)
            if raw is None or raw == "":
                continue
            try:
                config[key] = convert(raw)
            except ValueError as e:
                raise ConfigError(f"{env_name}={raw!r} is not a valid {convert.__name__}") from e

        self._validate(config)
        return config

    def _resolve_yaml_path(self) -> Path | None:
        if self._config_path:
            path = Path(self._config_path)
            if not path.is_file():
                raise ConfigError(f"Config file not found: {path}")
            return path

        env_path = os.environ.get(CONFIG_PATH_ENV)
        if env_path:
            return Path(env_path)

        local = Path.cwd() / DEFAULT_CONFIG_FILENAME
        return local if local.is_file() else None

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path.exists():
            self._logger.warning("Config file not found at %s, using defaults", path)
            return {}
        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning("Could not load config from %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            self._logger.warning("Ignoring config %s: top level must be a mapping", path)
            return {}
        return data

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _validate(self, config: dict[str, Any]) -> None:
        if not isinstance(config["exclude_dirs"], list) or not all(isinstance(d, str) for d in config["exclude_dirs"]):
            raise ConfigError("exclude_dirs must be a list of directory names")
        if not isinstance(config["extra_patterns"], list):
            raise ConfigError("extra_patterns must be a list of {pattern, kind} entries")
        if not isinstance(config["top_limit"], int) or config["top_limit"] < 1:
            raise ConfigError("top_limit must be a positive integer")
