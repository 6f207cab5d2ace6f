"""Logic for loading and merging resolver configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from src.config_error import ConfigError
from src.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "directory": None,
    "namespace_prefix": None,
    "class_roots": [".", "vendor"],
    "lowercase": ["file"],
    "hyphenate": ["file"],
    "prepend_class": True,
    "prepend_interface": True,
    "prepend_trait": True,
    "prefix_match": "substring",
    "candidate_order": "root_major",
    "debug": False,
}


def load_config(
    path: str | None = None, overrides: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Explicit ``overrides`` (typically command-line flags) win over the file.
    """
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as exc:
                msg = f"Invalid YAML in {p}: {exc}"
                raise ConfigError(msg) from exc
            if not isinstance(user_config, dict):
                msg = f"Configuration file {p} must contain a mapping"
                raise ConfigError(msg)
            config = deep_merge(config, _apply_aliases(user_config))
        else:
            logger.warning("Configuration file %s not found. Using defaults.", p)
    if overrides:
        config = deep_merge(config, _apply_aliases(overrides))
    return config


def _apply_aliases(user_config: dict[str, Any]) -> dict[str, Any]:
    """Map the historical ``underscore_to_hyphen`` key onto ``hyphenate``."""
    if "underscore_to_hyphen" not in user_config:
        return user_config
    renamed = dict(user_config)
    alias = renamed.pop("underscore_to_hyphen")
    renamed.setdefault("hyphenate", alias)
    return renamed
