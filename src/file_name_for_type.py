"""Logic for naming class files after WordPress coding standards."""

import re

from src.format_segment import format_segment
from src.resolver_config import FILE, ResolverConfig
from src.sanitize_namespace import NAMESPACE_SEPARATOR, sanitize_namespace

OBJECT_TYPES = ("class", "interface", "trait")
SOURCE_EXTENSION = ".php"

# foo-bar-interface -> interface-foo-bar, foo-abstract -> abstract-foo
MARKER_SUFFIX_RE = re.compile(r"^(.*)-(interface|abstract)$")


def file_name_for_type(
    config: ResolverConfig, qualified_name: str, object_type: str = "class"
) -> str:
    """Convert the simple name of a qualified name to a prefixed file name.

    Unknown object types fall back to ``class``. Names already ending in an
    ``-interface`` or ``-abstract`` marker get that marker moved to the front
    instead of a type prefix.
    """
    if object_type not in OBJECT_TYPES:
        object_type = "class"

    final_file = sanitize_namespace(qualified_name).split(NAMESPACE_SEPARATOR)[-1]
    final_file = format_segment(
        final_file,
        lowercase=FILE in config.lowercase,
        hyphenate=FILE in config.hyphenate,
    )

    if config.prepend_class or config.prepend_interface or config.prepend_trait:
        match = MARKER_SUFFIX_RE.match(final_file)
        if match:
            final_file = f"{match.group(2)}-{match.group(1)}"
        else:
            final_file = f"{object_type}-{final_file}"

    return final_file + SOURCE_EXTENSION
