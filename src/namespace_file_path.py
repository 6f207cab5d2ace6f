"""Utility for deriving the folder part of a class file path."""

import os

from src.format_segment import format_segment
from src.resolver_config import FOLDERS, ResolverConfig
from src.sanitize_namespace import NAMESPACE_SEPARATOR, sanitize_namespace


def strip_namespace_prefix(config: ResolverConfig, qualified_name: str) -> str:
    """Remove the first occurrence of the namespace prefix from a qualified name."""
    sanitized_class = sanitize_namespace(qualified_name)
    if not config.namespace_prefix:
        return sanitized_class
    prefix = sanitize_namespace(config.namespace_prefix, add_separator=True)
    return sanitized_class.replace(prefix, "", 1)


def namespace_file_path(config: ResolverConfig, qualified_name: str) -> str:
    """Get only the path leading to the final file, based on the namespace.

    Returns either an empty string or a relative path ending with a separator,
    e.g. ``Sub_Module/`` for ``Acme\\Sub_Module\\My_Class`` under prefix ``Acme``.
    """
    segments = strip_namespace_prefix(config, qualified_name).split(
        NAMESPACE_SEPARATOR
    )
    segments.pop()
    path = os.sep.join(segments) + os.sep

    path = format_segment(
        path,
        lowercase=FOLDERS in config.lowercase,
        hyphenate=FOLDERS in config.hyphenate,
    )

    if path in (NAMESPACE_SEPARATOR, "/", os.sep):
        return ""
    return path
