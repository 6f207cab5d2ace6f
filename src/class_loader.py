"""Loading collaborator that turns candidate paths into a loaded source file."""

import logging
import os
from collections.abc import Callable
from typing import TYPE_CHECKING

from src.needs_load import needs_load
from src.path_resolver import PathResolver
from src.resolution_exhausted import ResolutionExhausted
from src.resolution_result import ResolutionResult
from src.resolver_config import ResolverConfig

if TYPE_CHECKING:
    from src.loader_registry import LoaderRegistry

logger = logging.getLogger(__name__)


class ClassLoader:
    """Tries each candidate path in order and loads the first one that exists."""

    def __init__(
        self,
        config: ResolverConfig,
        load_file: Callable[[str], object] | None = None,
        is_defined: Callable[[str], bool] | None = None,
        exists: Callable[[str], bool] = os.path.isfile,
    ) -> None:
        """Initialize the loader.

        ``load_file`` receives the path of the first existing candidate; when it
        is omitted the loader only locates files. ``is_defined`` reports names
        the host already knows about and defaults to "nothing is defined".
        """
        self.config = config
        self.resolver = PathResolver(config)
        self.load_file = load_file
        self.is_defined = is_defined or (lambda _name: False)
        self.exists = exists

    def find(self, qualified_name: str) -> str:
        """Return the first existing candidate or raise ResolutionExhausted."""
        return self._first_existing(
            qualified_name, self.resolver.resolve(qualified_name)
        )

    def autoload(self, qualified_name: str) -> ResolutionResult:
        """Load the source file for ``qualified_name`` if this loader owns it.

        A name outside the namespace prefix, or one already defined, is skipped
        without touching the file system. When nothing exists on disk the
        lookup is declined quietly so another loader can try; with ``debug``
        the tried paths are logged.
        """
        if not needs_load(self.config, qualified_name, self.is_defined):
            return ResolutionResult(qualified_name, skipped=True)

        candidates = self.resolver.resolve(qualified_name)
        try:
            path = self._first_existing(qualified_name, candidates)
        except ResolutionExhausted as exc:
            if self.config.debug:
                logger.warning(
                    "Could not load file for %s. Tried: %s",
                    exc.qualified_name,
                    ", ".join(exc.candidates),
                )
            return ResolutionResult(qualified_name, candidates)

        if self.load_file is not None:
            self.load_file(path)
        logger.debug("Loaded %s from %s", qualified_name, path)
        return ResolutionResult(qualified_name, candidates, loaded_path=path)

    def register(self, registry: "LoaderRegistry", *, prepend: bool = False) -> None:
        """Register this loader with a host registry."""
        registry.register(self, prepend=prepend)

    def __call__(self, qualified_name: str) -> bool:
        """Autoload hook signature: True when a file was loaded."""
        return self.autoload(qualified_name).found

    def _first_existing(self, qualified_name: str, candidates: list[str]) -> str:
        for candidate in candidates:
            if self.exists(candidate):
                return candidate
        raise ResolutionExhausted(qualified_name, candidates)
