"""Utilities for trimming namespace and directory separators."""

import os

NAMESPACE_SEPARATOR = "\\"


def sanitize_namespace(namespace: str, *, add_separator: bool = False) -> str:
    """Trim leading and trailing namespace separators.

    With ``add_separator`` a single trailing separator is appended, which is the
    form used when stripping a namespace prefix from a qualified name.
    """
    trimmed = namespace.strip(NAMESPACE_SEPARATOR)
    if add_separator:
        return trimmed + NAMESPACE_SEPARATOR
    return trimmed


def sanitize_file_path(file_path: str) -> str:
    """Remove leading and trailing directory separators."""
    return file_path.strip("/" + os.sep)
