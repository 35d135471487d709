"""
Unlocalized pathname observer.

Derives the canonical pathname from whatever the host router currently
reports.
"""
from typing import Callable, Optional
import logging

from src.domain.models import NavigationEvent
from src.i18n.locale import LocaleContext, resolve
from src.i18n.paths import decode
from src.navigation.router import HostRouter

logger = logging.getLogger(__name__)


class UnlocalizedPathnameObserver:
    """
    Exposes the canonical form of the host router's pathname.

    The value is recomputed on every read, so it always reflects the most
    recently completed host navigation.
    """

    def __init__(self, host: HostRouter, context: Optional[LocaleContext] = None):
        self.host = host
        self.context = context

    @property
    def pathname(self) -> str:
        """Canonical pathname of the current host location."""
        config = resolve(self.context).config
        return decode(self.host.current_pathname(), config).canonical

    @property
    def locale(self) -> str:
        """Locale encoded in the current host location."""
        config = resolve(self.context).config
        return decode(self.host.current_pathname(), config).locale

    def watch(self, listener: Callable[[str], None]) -> Callable[[], None]:
        """
        Call `listener` with the canonical pathname after each host navigation.

        Returns:
            Callable that stops watching
        """
        def on_navigation(event: NavigationEvent) -> None:
            config = resolve(self.context).config
            canonical = decode(event.pathname, config).canonical
            logger.debug(f"Host navigated ({event.method.value}) to {event.pathname}: {canonical}")
            listener(canonical)

        return self.host.subscribe(on_navigation)
