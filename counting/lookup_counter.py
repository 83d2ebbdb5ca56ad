"""
Counters backed by an external table of per-term counts.

The counts are acquired once, by lookup_counts(), and cached for the lifetime
of the counter. Acquisition happens on an explicit initialize() call or,
failing that, on the first count().
"""

import logging
import threading
from abc import abstractmethod
from types import MappingProxyType
from typing import Dict, Mapping

from core.exceptions import CounterInitializationError
from core.models import HierarchyNode
from .counter_base import NodeCounter

logger = logging.getLogger(__name__)


class LookupNodeCounter(NodeCounter):
    """
    Base class for counters that overlay looked-up counts on the hierarchy.

    Subclasses receive their resources in the constructor and implement
    lookup_counts(), calling set_count() for every term found. A node's size
    is its own looked-up count (0 when absent) plus the sizes of its children.
    """

    def __init__(self):
        self._counts: Dict[str, int] = {}
        self._initialized = False
        self._init_lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def counts(self) -> Mapping[str, int]:
        """Read-only view of the cached counts."""
        return MappingProxyType(self._counts)

    def initialize(self) -> None:
        """
        Acquire and cache the counts.

        Calling this again once the counts are cached logs a warning and
        does nothing; the cache is never refreshed.

        Raises:
            CounterInitializationError: If the counts resource cannot be read
        """
        self._initialize(warn_if_loaded=True)

    def _initialize(self, warn_if_loaded: bool) -> None:
        with self._init_lock:
            # another thread may have finished loading while we waited
            if self._initialized:
                if warn_if_loaded:
                    logger.warning(
                        "Ontology hierarchy counts have been loaded and cached, "
                        "they will not be reloaded"
                    )
                return

            try:
                self.lookup_counts()
            except CounterInitializationError:
                self._counts.clear()
                raise
            except (OSError, ValueError) as e:
                self._counts.clear()
                raise CounterInitializationError(
                    f"Unable to create {type(self).__name__} - "
                    f"communication with counts resource failed: {e}"
                ) from e

            self._initialized = True
            logger.info("Successfully acquired counts for %d URIs", len(self._counts))

    def set_count(self, uri: str, count: int) -> None:
        self._counts[uri] = count

    def count(self, node: HierarchyNode) -> int:
        if not self._initialized:
            self._initialize(warn_if_loaded=False)

        own_count = self._counts.get(node.uri, 0) if node.uri is not None else 0
        return own_count + self.sum_children(node)

    @abstractmethod
    def lookup_counts(self) -> None:
        """
        Read the counts resource and populate the cache with set_count().

        Raises:
            OSError: If the resource cannot be read
            ValueError: If the resource is not in the expected format
        """
        pass
