"""
Scoped global stylesheet registration
- A page acquires a handle when it mounts and releases it when it unmounts
- Release is idempotent, so cleanup can run on every exit path
- The registry mirrors what has been injected into each browser document
"""
from __future__ import annotations

import json
import logging
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Tuple

from station_monitor import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleHandle:
    owner: str       # client token (one browser tab)
    element_id: str  # id of the <style> element in that document

    def inject_script(self, css: str) -> str:
        """JS that creates (or replaces) the <style> element in the page head."""
        return (
            "(() => {"
            f"let el = document.getElementById({json.dumps(self.element_id)});"
            "if (!el) {"
            "el = document.createElement('style');"
            f"el.id = {json.dumps(self.element_id)};"
            "document.head.appendChild(el);"
            "}"
            f"el.textContent = {json.dumps(css)};"
            "})()"
        )

    def remove_script(self) -> str:
        """JS that removes the <style> element if it is still present."""
        return (
            "(() => {"
            f"const el = document.getElementById({json.dumps(self.element_id)});"
            "if (el) { el.remove(); }"
            "})()"
        )


class StyleRegistry:
    """Tracks injected global styles per (owner, style name).

    A tab that is closed never unmounts its pages, so entries older than
    `max_age` seconds are pruned on every acquire.
    """

    def __init__(self, max_age: float = config.STYLE_MAX_AGE, clock: Callable[[], float] = time.time):
        self.max_age = max_age
        self._clock = clock
        self._styles: Dict[StyleHandle, Tuple[str, float]] = {}
        self._lock = threading.Lock()

    @staticmethod
    def handle_for(owner: str, name: str) -> StyleHandle:
        return StyleHandle(owner=owner, element_id=f"sm-style-{name}")

    def acquire(self, owner: str, name: str, css: str) -> StyleHandle:
        """Register `css` for `owner`. Re-acquiring the same name replaces it."""
        handle = self.handle_for(owner, name)
        now = self._clock()
        with self._lock:
            self._prune(now)
            replaced = handle in self._styles
            self._styles[handle] = (css, now)
        if replaced:
            logger.debug(f"Style '{name}' re-registered for {owner}")
        return handle

    def release(self, handle: StyleHandle) -> bool:
        """Deregister a handle. Returns False if it was already released."""
        with self._lock:
            removed = self._styles.pop(handle, None) is not None
        if not removed:
            logger.debug(f"Style {handle.element_id} already released for {handle.owner}")
        return removed

    def _prune(self, now: float) -> int:
        stale = [h for h, (_, acquired) in self._styles.items() if now - acquired > self.max_age]
        for handle in stale:
            del self._styles[handle]
        if stale:
            logger.info(f"Pruned {len(stale)} stale page styles")
        return len(stale)

    def count(self, owner: str | None = None) -> int:
        with self._lock:
            if owner is None:
                return len(self._styles)
            return sum(1 for h in self._styles if h.owner == owner)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, handle: StyleHandle) -> bool:
        with self._lock:
            return handle in self._styles

    @contextmanager
    def scoped(self, owner: str, name: str, css: str) -> Iterator[StyleHandle]:
        handle = self.acquire(owner, name, css)
        try:
            yield handle
        finally:
            self.release(handle)


# Process-wide registry used by the pages
registry = StyleRegistry()
