"""Caller-owned cache of built boundary views.

The cache is an explicit object passed to BoundaryChecker, never module
state: two checkers with two caches never share views.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archbound.domain.view import BoundaryView

logger = logging.getLogger(__name__)


class ViewCache:
    """Thread-safe app → BoundaryView cache.

    Views are immutable, so a cached view can be shared by concurrent runs.
    Invalidation is the owner's job: call clear() or evict() when the
    declarations of an app change.
    """

    def __init__(self) -> None:
        self._views: dict[str, BoundaryView] = {}
        self._lock = threading.Lock()

    def get(self, app: str) -> BoundaryView | None:
        """Get cached view of an app (None on miss)."""
        with self._lock:
            view = self._views.get(app)
        logger.debug("view cache %s for app %s", "hit" if view is not None else "miss", app)
        return view

    def put(self, view: BoundaryView) -> None:
        """Store view under its app, replacing any previous one."""
        with self._lock:
            self._views[view.app] = view

    def evict(self, app: str) -> None:
        """Drop the cached view of an app, if any."""
        with self._lock:
            self._views.pop(app, None)

    def clear(self) -> None:
        """Drop all cached views."""
        with self._lock:
            self._views.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._views)

    def __contains__(self, app: object) -> bool:
        with self._lock:
            return app in self._views
