"""Configuration loading for Pathfinder.

Settings come from an optional ``pathfinder.yaml`` merged over
``DEFAULT_CONFIG``, then from ``PATHFINDER_*`` environment variables.

Key functions:
- load_config: Load ``pathfinder.yaml`` from a project root.
- load_config_file: Load an explicit configuration file.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .bundles import BUNDLE_EXTENSION
from .candidates import DEFAULT_BUILD_ROOT, DEFAULT_COMPONENTS_BUNDLE
from .platforms import Platform

CONFIG_FILENAME = "pathfinder.yaml"


class ConfigError(Exception):
    """Error raised for an unreadable or malformed configuration file.

    Attributes:
        source_path: The configuration file, if any.
        message: Human-readable error message.
    """

    def __init__(self, message: str, source_path: Path | None = None):
        self.source_path = source_path
        self.message = message
        prefix = f"{source_path}: " if source_path is not None else ""
        super().__init__(f"{prefix}{message}")


DEFAULT_CONFIG: dict[str, Any] = {
    "build_root": DEFAULT_BUILD_ROOT,
    "components_bundle": DEFAULT_COMPONENTS_BUNDLE,
    "bundle_extensions": [BUNDLE_EXTENSION],
    "stat_timeout": None,
    "remappings": [],
    "executable_path": None,
    "bundle_anchor": None,
}


def load_config(project_root: Path, env: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Load configuration from ``pathfinder.yaml`` in ``project_root``.

    Args:
        project_root: Directory to look for the configuration file in.
        env: Environment to read overrides from; defaults to ``os.environ``.

    Returns:
        Dictionary containing configuration values, with defaults applied.
    """
    config_path = project_root / CONFIG_FILENAME
    if config_path.exists():
        return load_config_file(config_path, env=env)
    return _apply_env(_copy_defaults(), os.environ if env is None else env)


def load_config_file(
    config_path: Path, env: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """Load configuration from an explicit YAML file.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or holds
            values of the wrong type.
    """
    config = _copy_defaults()
    try:
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"cannot read configuration: {exc}", config_path) from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}", config_path) from exc
    if not isinstance(loaded, dict):
        raise ConfigError("configuration must be a mapping", config_path)
    config.update(loaded)
    _validate(config, config_path)
    return _apply_env(config, os.environ if env is None else env)


def _copy_defaults() -> dict[str, Any]:
    config = DEFAULT_CONFIG.copy()
    config["bundle_extensions"] = list(DEFAULT_CONFIG["bundle_extensions"])
    config["remappings"] = []
    return config


def _apply_env(config: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    build_root = env.get("PATHFINDER_BUILD_ROOT")
    if build_root:
        config["build_root"] = build_root
    timeout = env.get("PATHFINDER_STAT_TIMEOUT")
    if timeout:
        try:
            config["stat_timeout"] = float(timeout)
        except ValueError as exc:
            raise ConfigError(
                f"PATHFINDER_STAT_TIMEOUT must be a number, got {timeout!r}"
            ) from exc
    return config


def _validate(config: dict[str, Any], source: Path) -> None:
    for key in ("build_root", "components_bundle"):
        if not isinstance(config[key], str):
            raise ConfigError(f"{key} must be a string", source)
    for key in ("executable_path", "bundle_anchor"):
        if config[key] is not None and not isinstance(config[key], str):
            raise ConfigError(f"{key} must be a string or null", source)

    extensions = config["bundle_extensions"]
    if isinstance(extensions, str):
        config["bundle_extensions"] = [extensions]
    elif not isinstance(extensions, list) or not all(
        isinstance(ext, str) for ext in extensions
    ):
        raise ConfigError("bundle_extensions must be a list of strings", source)

    timeout = config["stat_timeout"]
    if timeout is not None and (
        isinstance(timeout, bool) or not isinstance(timeout, (int, float))
    ):
        raise ConfigError("stat_timeout must be a number or null", source)

    remappings = config["remappings"] or []
    if not isinstance(remappings, list):
        raise ConfigError("remappings must be a list", source)
    for entry in remappings:
        if not isinstance(entry, dict) or not {"platform", "from", "to"} <= entry.keys():
            raise ConfigError(
                "each remapping needs platform, from and to keys", source
            )
        try:
            Platform.parse(str(entry["platform"]))
        except ValueError as exc:
            raise ConfigError(str(exc), source) from exc
    config["remappings"] = remappings
