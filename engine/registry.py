"""
registry.py — Runner Cache
===========================
Hands out one SortRunner per algorithm key, created on first use and
reused afterwards, so pause/stop aimed at "quick_sort" always reaches
the same control flags.

The registry is an ordinary object.  Whoever needs it gets it passed in;
there is no module-level instance.
"""

import logging
import threading
from typing import Dict, List, Optional

from algorithms import REGISTRY, AlgoInfo, COMPARISON, NON_COMPARISON
from engine.control import POLL_INTERVAL
from engine.errors import AlgorithmNotSupported
from engine.runner import SortRunner


logger = logging.getLogger(__name__)


class AlgorithmRegistry:

    def __init__(
        self,
        catalogue: Optional[Dict[str, AlgoInfo]] = None,
        poll_interval: float = POLL_INTERVAL,
    ):
        self._catalogue: Dict[str, AlgoInfo] = dict(catalogue if catalogue is not None else REGISTRY)
        self._poll_interval = poll_interval
        self._cache: Dict[str, SortRunner] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> SortRunner:
        """Cached runner for `key`; raises AlgorithmNotSupported for unknown keys."""
        info = self._catalogue.get(key)
        if info is None:
            raise AlgorithmNotSupported(str(key))
        with self._lock:
            runner = self._cache.get(key)
            if runner is None:
                runner = SortRunner(info, self._poll_interval)
                self._cache[key] = runner
            return runner

    def info(self, key: str) -> AlgoInfo:
        info = self._catalogue.get(key)
        if info is None:
            raise AlgorithmNotSupported(str(key))
        return info

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------
    def all_algorithms(self) -> List[str]:
        return list(self._catalogue)

    def comparison_algorithms(self) -> List[str]:
        return [k for k, a in self._catalogue.items() if COMPARISON in a.tags]

    def non_comparison_algorithms(self) -> List[str]:
        return [k for k, a in self._catalogue.items() if NON_COMPARISON in a.tags]

    # ------------------------------------------------------------------
    # Cache maintenance
    # ------------------------------------------------------------------
    @property
    def cached_keys(self) -> List[str]:
        with self._lock:
            return list(self._cache)

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    def reset_all(self) -> None:
        """
        Put every cached runner's control back to idle.  A runner that is
        mid-run is stopped instead; it goes idle when its loop unwinds.
        """
        with self._lock:
            runners = list(self._cache.values())
        for runner in runners:
            if runner.is_running:
                runner.stop()
            else:
                runner.reset()
        logger.debug("reset %d cached runner(s)", len(runners))
