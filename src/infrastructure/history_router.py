"""
In-memory host router.
Keeps a browser-like history stack and notifies listeners when a navigation
completes. Implements the HostRouter interface.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from src.domain.models import NavigationEvent, NavigationMethod
from src.i18n.paths import normalize_path, split_path

logger = logging.getLogger(__name__)


@dataclass
class HistoryEntry:
    """One entry of the history stack."""
    url: str
    options: dict[str, Any] = field(default_factory=dict)

    @property
    def pathname(self) -> str:
        """Path component of the URL, without query or fragment."""
        return split_path(self.url)[0]


class MemoryHistoryRouter:
    """
    History-stack router kept entirely in memory.

    push() drops any forward entries, replace() overwrites the current
    entry, back() moves one entry back and is a no-op on the first entry.
    Navigations complete synchronously and listeners are notified in
    subscription order.
    """

    def __init__(self, initial_url: str = "/"):
        self._entries: list[HistoryEntry] = [HistoryEntry(url=normalize_path(initial_url))]
        self._index = 0
        self._listeners: list[Callable[[NavigationEvent], None]] = []
        self.prefetched: list[str] = []

    @property
    def current(self) -> HistoryEntry:
        return self._entries[self._index]

    @property
    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def current_pathname(self) -> str:
        return self.current.pathname

    def current_url(self) -> str:
        return self.current.url

    def push(self, path: str, options: Optional[dict[str, Any]] = None) -> None:
        del self._entries[self._index + 1:]
        self._entries.append(HistoryEntry(url=path, options=dict(options or {})))
        self._index += 1
        self._complete(NavigationMethod.PUSH)

    def replace(self, path: str, options: Optional[dict[str, Any]] = None) -> None:
        self._entries[self._index] = HistoryEntry(url=path, options=dict(options or {}))
        self._complete(NavigationMethod.REPLACE)

    def back(self) -> None:
        if self._index == 0:
            logger.debug("back() on the first history entry ignored")
            return
        self._index -= 1
        self._complete(NavigationMethod.BACK)

    def prefetch(self, path: str) -> None:
        if path not in self.prefetched:
            self.prefetched.append(path)

    def subscribe(self, listener: Callable[[NavigationEvent], None]) -> Callable[[], None]:
        """Register a navigation-completed listener."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _complete(self, method: NavigationMethod) -> None:
        event = NavigationEvent(
            method=method,
            pathname=self.current.pathname,
            url=self.current.url,
        )
        logger.debug(f"Navigation completed: {method.value} {event.url}")
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(event)
