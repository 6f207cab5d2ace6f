"""Immutable resolver configuration and its validation."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from typing import Any

from src.config_error import ConfigError
from src.sanitize_namespace import sanitize_namespace

FILE = "file"
FOLDERS = "folders"

# Accepted spellings for the lowercase/hyphenate targets
_TARGET_ALIASES = {
    "file": FILE,
    "files": FILE,
    "folder": FOLDERS,
    "folders": FOLDERS,
}

SUBSTRING = "substring"
SEGMENTS = "segments"
PREFIX_MATCH_MODES = (SUBSTRING, SEGMENTS)

ROOT_MAJOR = "root_major"
VARIANT_MAJOR = "variant_major"
CANDIDATE_ORDERS = (ROOT_MAJOR, VARIANT_MAJOR)

DEFAULT_CLASS_ROOTS = (".", "vendor")


def _normalize_targets(name: str, value: object) -> frozenset[str]:
    """Turn a lowercase/hyphenate setting into a set of format targets."""
    if value is None:
        return frozenset()
    items = [value] if isinstance(value, str) else value
    if not isinstance(items, Iterable):
        msg = f"{name} must be a list of 'file' and/or 'folders', got {value!r}"
        raise ConfigError(msg)

    targets = set()
    for item in items:
        key = str(item).strip().lower()
        if key in ("", "none"):
            continue
        if key not in _TARGET_ALIASES:
            msg = f"{name}: unknown target {item!r} (expected 'file' or 'folders')"
            raise ConfigError(msg)
        targets.add(_TARGET_ALIASES[key])
    return frozenset(targets)


def _normalize_roots(value: object) -> tuple[str, ...]:
    """Accept a single class root or a sequence of them."""
    if value is None:
        return DEFAULT_CLASS_ROOTS
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, Iterable):
        msg = f"class_roots must be a string or a list of strings, got {value!r}"
        raise ConfigError(msg)
    roots = tuple(str(root) for root in value)
    if not roots:
        msg = "class_roots must name at least one directory"
        raise ConfigError(msg)
    return roots


@dataclass(frozen=True)
class ResolverConfig:
    """Settings that drive the qualified-name to file-path mapping."""

    directory: str
    namespace_prefix: str = ""
    class_roots: tuple[str, ...] = DEFAULT_CLASS_ROOTS
    lowercase: frozenset[str] = frozenset({FILE})
    hyphenate: frozenset[str] = frozenset({FILE})
    prepend_class: bool = True
    prepend_interface: bool = True
    prepend_trait: bool = True
    prefix_match: str = SUBSTRING
    candidate_order: str = ROOT_MAJOR
    debug: bool = False

    def __post_init__(self) -> None:
        """Normalize collection fields and reject out-of-domain values."""
        if not isinstance(self.directory, str) or not self.directory:
            msg = "directory is required"
            raise ConfigError(msg)

        # Frozen dataclass: normalized values are written through object.__setattr__
        object.__setattr__(
            self, "namespace_prefix", sanitize_namespace(self.namespace_prefix or "")
        )
        object.__setattr__(self, "class_roots", _normalize_roots(self.class_roots))
        object.__setattr__(
            self, "lowercase", _normalize_targets("lowercase", self.lowercase)
        )
        object.__setattr__(
            self, "hyphenate", _normalize_targets("hyphenate", self.hyphenate)
        )

        for flag in ("prepend_class", "prepend_interface", "prepend_trait", "debug"):
            if not isinstance(getattr(self, flag), bool):
                msg = f"{flag} must be true or false, got {getattr(self, flag)!r}"
                raise ConfigError(msg)

        if self.prefix_match not in PREFIX_MATCH_MODES:
            msg = (
                f"prefix_match must be one of {', '.join(PREFIX_MATCH_MODES)}, "
                f"got {self.prefix_match!r}"
            )
            raise ConfigError(msg)
        if self.candidate_order not in CANDIDATE_ORDERS:
            msg = (
                f"candidate_order must be one of {', '.join(CANDIDATE_ORDERS)}, "
                f"got {self.candidate_order!r}"
            )
            raise ConfigError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ResolverConfig":
        """Build a config from a loaded settings mapping.

        ``underscore_to_hyphen`` is accepted as an alias of ``hyphenate``.
        Keys set to ``None`` fall back to the field default.
        """
        values = dict(data)
        if "underscore_to_hyphen" in values:
            alias = values.pop("underscore_to_hyphen")
            if values.get("hyphenate") is None:
                values["hyphenate"] = alias

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            msg = f"Unknown configuration key(s): {', '.join(unknown)}"
            raise ConfigError(msg)

        kwargs = {key: value for key, value in values.items() if value is not None}
        if "directory" not in kwargs:
            msg = "directory is required"
            raise ConfigError(msg)
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view of the configuration."""
        return {
            "directory": self.directory,
            "namespace_prefix": self.namespace_prefix,
            "class_roots": list(self.class_roots),
            "lowercase": sorted(self.lowercase),
            "hyphenate": sorted(self.hyphenate),
            "prepend_class": self.prepend_class,
            "prepend_interface": self.prepend_interface,
            "prepend_trait": self.prepend_trait,
            "prefix_match": self.prefix_match,
            "candidate_order": self.candidate_order,
            "debug": self.debug,
        }
