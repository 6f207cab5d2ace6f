"""Resolution of qualified class names to candidate source file paths."""

import logging
import os
from collections.abc import Callable

from src.file_name_for_type import file_name_for_type
from src.namespace_file_path import namespace_file_path
from src.needs_load import needs_load
from src.resolver_config import VARIANT_MAJOR, ResolverConfig
from src.sanitize_namespace import sanitize_file_path

logger = logging.getLogger(__name__)


def _never_defined(_qualified_name: str) -> bool:
    return False


class PathResolver:
    """Maps qualified names to the ordered list of files that may define them.

    The resolver holds no state besides its configuration; every call recomputes
    its result.
    """

    def __init__(self, config: ResolverConfig) -> None:
        """Initialize the resolver with an immutable configuration."""
        self.config = config

    def class_root_dirs(self) -> list[str]:
        """Full paths of the configured class roots, each ending in a separator."""
        base = self.config.directory.rstrip("/\\")
        dirs = []
        for class_root in self.config.class_roots:
            root = sanitize_file_path(class_root)
            root = f"{root}{os.sep}" if root else ""
            dirs.append(f"{base}{os.sep}{root}")
        return dirs

    def file_name_variants(self, qualified_name: str) -> list[str]:
        """File names to try, primary class form first, then interface and trait."""
        object_types = ["class"]
        if self.config.prepend_interface:
            object_types.append("interface")
        if self.config.prepend_trait:
            object_types.append("trait")

        variants: list[str] = []
        for object_type in object_types:
            name = file_name_for_type(self.config, qualified_name, object_type)
            # Suffix-marked names come out identical for every type
            if name not in variants:
                variants.append(name)
        return variants

    def resolve(self, qualified_name: str) -> list[str]:
        """Return every candidate path for ``qualified_name`` in lookup order."""
        folder = namespace_file_path(self.config, qualified_name)
        variants = self.file_name_variants(qualified_name)
        dirs = self.class_root_dirs()

        if self.config.candidate_order == VARIANT_MAJOR:
            candidates = [
                f"{class_dir}{folder}{variant}"
                for variant in variants
                for class_dir in dirs
            ]
        else:
            candidates = [
                f"{class_dir}{folder}{variant}"
                for class_dir in dirs
                for variant in variants
            ]

        logger.debug(
            "Resolved %s to %d candidate(s)", qualified_name, len(candidates)
        )
        return candidates

    def convert_class_to_file(
        self,
        qualified_name: str,
        *,
        check_loading_need: bool = False,
        is_defined: Callable[[str], bool] | None = None,
    ) -> list[str]:
        """Resolve a qualified name, optionally short-circuiting on ``needs_load``."""
        if check_loading_need and not needs_load(
            self.config, qualified_name, is_defined or _never_defined
        ):
            return []
        return self.resolve(qualified_name)


def resolve(config: ResolverConfig, qualified_name: str) -> list[str]:
    """Resolve ``qualified_name`` under ``config`` to ordered candidate paths."""
    return PathResolver(config).resolve(qualified_name)
