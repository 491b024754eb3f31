"""An injectable in-memory cache for the extracted catalog."""

import logging
from collections.abc import Callable

from doccatalog.models import DocsData

logger = logging.getLogger(__name__)

Loader = Callable[[], DocsData]


class DocsCache:
    """Holds one ``DocsData`` snapshot, keyed by the build hash."""

    def __init__(self, loader: Loader | None = None) -> None:
        """Initialize with the default function that produces a fresh catalog."""
        self.loader = loader
        self.data: DocsData | None = None
        self.key: str | None = None

    @property
    def is_initialized(self) -> bool:
        return self.data is not None

    def get(self, key: str | None = None, loader: Loader | None = None) -> DocsData:
        """Return the cached catalog, loading it on first use or on a new key.

        ``loader`` takes precedence over the one given at construction.
        """
        if self.data is None or key != self.key:
            load = loader or self.loader
            if load is None:
                msg = "DocsCache has no loader"
                raise ValueError(msg)
            if self.data is not None:
                logger.debug("Cache key changed (%s -> %s); reloading", self.key, key)
            self.data = load()
            self.key = key
        return self.data

    def prime(self, data: DocsData, key: str | None = None) -> None:
        """Store an already built catalog."""
        self.data = data
        self.key = key

    def invalidate(self) -> None:
        """Drop the cached catalog so the next ``get`` reloads it."""
        self.data = None
        self.key = None
