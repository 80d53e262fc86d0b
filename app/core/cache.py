# app/core/cache.py
"""
In-process cache for the dashboard list views.

A view is cached under its path (e.g. "/dashboard/invoices") until an action
calls ``revalidate_path`` on it; the next read reloads from the database.
"""

import logging
import threading
from typing import Any, Callable, Dict, Set

logger = logging.getLogger(__name__)


class ViewCache:
    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}
        self._stale: Set[str] = set()
        # bumped on every revalidation; a load only counts as fresh if the
        # generation it started under is still current when it finishes
        self._generations: Dict[str, int] = {}
        # sync endpoints run on a thread pool
        self._lock = threading.Lock()

    def get_or_load(self, path: str, loader: Callable[[], Any]) -> Any:
        with self._lock:
            if path in self._values and path not in self._stale:
                return self._values[path]
            generation = self._generations.get(path, 0)

        value = loader()

        with self._lock:
            if self._generations.get(path, 0) != generation:
                logger.debug("View %s revalidated during load; not cached", path)
                return value
            self._values[path] = value
            self._stale.discard(path)
        logger.debug("View %s loaded", path)
        return value

    def revalidate_path(self, path: str) -> None:
        with self._lock:
            self._generations[path] = self._generations.get(path, 0) + 1
            self._stale.add(path)
        logger.info("View %s marked stale", path)

    def is_stale(self, path: str) -> bool:
        with self._lock:
            return path in self._stale or path not in self._values

    def clear(self) -> None:
        with self._lock:
            self._values.clear()
            self._stale.clear()
