"""Registry of autoload callbacks, modelled on a host's class-loading hook."""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

Loader = Callable[[str], bool]


class LoaderRegistry:
    """Ordered set of loaders consulted when a qualified name is not defined."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self.loaders: list[Loader] = []

    def register(self, loader: Loader, *, prepend: bool = False) -> None:
        """Add a loader; registering the same loader twice has no effect."""
        if loader in self.loaders:
            return
        if prepend:
            self.loaders.insert(0, loader)
        else:
            self.loaders.append(loader)

    def unregister(self, loader: Loader) -> bool:
        """Remove a loader, returning False if it was not registered."""
        if loader not in self.loaders:
            return False
        self.loaders.remove(loader)
        return True

    def dispatch(self, qualified_name: str) -> bool:
        """Offer the name to each loader in turn until one of them loads it."""
        for loader in list(self.loaders):
            if loader(qualified_name):
                return True
        logger.debug("No registered loader handled %s", qualified_name)
        return False
