"""Predicate deciding whether a qualified name belongs to this resolver."""

from collections.abc import Callable

from src.resolver_config import SEGMENTS, ResolverConfig
from src.sanitize_namespace import NAMESPACE_SEPARATOR, sanitize_namespace


def prefix_matches(config: ResolverConfig, qualified_name: str) -> bool:
    """Check the qualified name against the configured namespace prefix.

    In ``substring`` mode the prefix only has to occur somewhere in the name. In
    ``segments`` mode it must equal the leading segments of the namespace path.
    """
    prefix = config.namespace_prefix
    if not prefix:
        return True
    if config.prefix_match != SEGMENTS:
        return prefix in qualified_name

    prefix_segments = prefix.split(NAMESPACE_SEPARATOR)
    name_segments = sanitize_namespace(qualified_name).split(NAMESPACE_SEPARATOR)
    namespace_segments = name_segments[:-1]
    return namespace_segments[: len(prefix_segments)] == prefix_segments


def needs_load(
    config: ResolverConfig,
    qualified_name: str,
    is_defined: Callable[[str], bool],
) -> bool:
    """Return True if the name is not defined yet and falls under the prefix.

    ``is_defined`` stands in for the host's class, interface and trait tables.
    """
    if is_defined(qualified_name):
        return False
    return prefix_matches(config, qualified_name)
