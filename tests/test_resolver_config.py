"""Tests for configuration loading, merging and validation."""

from pathlib import Path

import pytest
import yaml

from src.compute_config_hash import compute_config_hash
from src.config_error import ConfigError
from src.deep_merge import deep_merge
from src.load_config import DEFAULT_CONFIG, load_config
from src.resolver_config import FILE, FOLDERS, ResolverConfig


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_lists_replace() -> None:
    """Verify that lists are replaced, not concatenated."""
    merged = deep_merge({"class_roots": [".", "vendor"]}, {"class_roots": ["lib"]})
    assert merged == {"class_roots": ["lib"]}


def test_deep_merge_none_keeps_base() -> None:
    """Verify that a None value does not clear a default."""
    merged = deep_merge({"lowercase": ["file"]}, {"lowercase": None, "new": None})
    assert merged == {"lowercase": ["file"], "new": None}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config["class_roots"] == [".", "vendor"]


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {"namespace_prefix": "Acme", "class_roots": ["lib"], "debug": True}
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["namespace_prefix"] == "Acme"
    assert loaded["class_roots"] == ["lib"]
    assert loaded["debug"] is True
    assert loaded["lowercase"] == ["file"]  # Default


def test_load_config_overrides_win(tmp_path: Path) -> None:
    """Verify explicit overrides take precedence over the file."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("namespace_prefix: FromFile\ndirectory: /file\n")

    loaded = load_config(
        str(config_file), {"namespace_prefix": "FromFlag", "directory": None}
    )
    assert loaded["namespace_prefix"] == "FromFlag"
    assert loaded["directory"] == "/file"


def test_load_config_underscore_to_hyphen_alias(tmp_path: Path) -> None:
    """Verify the historical key name is still understood."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("underscore_to_hyphen: [file, folders]\n")

    loaded = load_config(str(config_file))
    assert loaded["hyphenate"] == ["file", "folders"]
    assert "underscore_to_hyphen" not in loaded


def test_load_config_missing_file_uses_defaults(tmp_path: Path) -> None:
    """Verify a missing file falls back to the defaults."""
    assert load_config(str(tmp_path / "absent.yml")) == DEFAULT_CONFIG


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify a YAML document that is not a mapping is rejected."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(str(config_file))


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    """Verify YAML syntax errors surface as configuration errors."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("class_roots: [unclosed\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(str(config_file))


def test_from_mapping_normalizes_values() -> None:
    """Verify collections are frozen and spellings normalized."""
    config = ResolverConfig.from_mapping(
        {
            **DEFAULT_CONFIG,
            "directory": "/proj",
            "class_roots": "src",
            "lowercase": ["Folder", "file"],
            "hyphenate": "none",
        }
    )
    assert config.class_roots == ("src",)
    assert config.lowercase == frozenset({FILE, FOLDERS})
    assert config.hyphenate == frozenset()
    assert config.namespace_prefix == ""


def test_from_mapping_requires_directory() -> None:
    """Verify the base directory is mandatory."""
    with pytest.raises(ConfigError, match="directory"):
        ResolverConfig.from_mapping(DEFAULT_CONFIG)


def test_from_mapping_rejects_unknown_keys() -> None:
    """Verify typos in configuration keys are reported."""
    with pytest.raises(ConfigError, match="prepend_klass"):
        ResolverConfig.from_mapping({"directory": "/proj", "prepend_klass": True})


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("lowercase", ["files", "everything"]),
        ("prepend_trait", "yes"),
        ("prefix_match", "regex"),
        ("candidate_order", "sideways"),
        ("class_roots", []),
    ],
)
def test_invalid_values_are_rejected(key: str, value: object) -> None:
    """Verify out-of-domain values raise ConfigError."""
    with pytest.raises(ConfigError):
        ResolverConfig.from_mapping({"directory": "/proj", key: value})


def test_compute_config_hash_stability() -> None:
    """Verify the hash depends on values, not on how they were spelled."""
    config1 = ResolverConfig(directory="/proj", lowercase=["folders", "file"])
    config2 = ResolverConfig(directory="/proj", lowercase=frozenset({FILE, FOLDERS}))
    config3 = ResolverConfig(directory="/other")
    assert compute_config_hash(config1) == compute_config_hash(config2)
    assert compute_config_hash(config1) != compute_config_hash(config3)
