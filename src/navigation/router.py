"""
Localized router facade.

Application code navigates with canonical paths. The facade encodes them
for the active locale and forwards them to the host router, which only ever
sees localized paths.
"""
from typing import Any, Callable, Optional, Protocol
import logging

from src.domain.errors import ConfigError, InvalidPathError
from src.domain.models import LocaleState, NavigationEvent, NavigationIntent, NavigationMethod
from src.i18n.locale import LocaleContext, resolve
from src.i18n.paths import encode, is_local_href

logger = logging.getLogger(__name__)


NavigationListener = Callable[[NavigationEvent], None]


class HostRouter(Protocol):
    """Navigation surface the hosting framework must provide."""

    def current_pathname(self) -> str:
        ...

    def push(self, path: str, options: Optional[dict[str, Any]] = None) -> None:
        ...

    def replace(self, path: str, options: Optional[dict[str, Any]] = None) -> None:
        ...

    def back(self) -> None:
        ...

    def prefetch(self, path: str) -> None:
        ...

    def subscribe(self, listener: NavigationListener) -> Callable[[], None]:
        """Register a navigation-completed listener; returns an unsubscribe callable."""
        ...


class LocalizedRouter:
    """
    Facade over a HostRouter that accepts canonical paths.

    Without an explicit context, every call reads the locale context that
    is current at call time, so two successive calls each use the locale
    valid at their own invocation.
    """

    def __init__(self, host: HostRouter, context: Optional[LocaleContext] = None):
        self.host = host
        self.context = context

    def _state(self) -> LocaleState:
        return resolve(self.context)

    def _localize(self, path: Optional[str], locale: Optional[str]) -> str:
        # "//host/x" starts with '/' but is a protocol-relative external URL
        if path is None or not path.startswith("/") or not is_local_href(path):
            logger.warning(f"Rejected navigation to non-canonical path: {path!r}")
            raise InvalidPathError(f"Navigation path must be a canonical path starting with '/': {path!r}")

        state = self._state()
        target_locale = locale if locale is not None else state.active_locale
        if not state.config.is_supported(target_locale):
            raise ConfigError(
                f"Locale {target_locale!r} is not one of {list(state.config.locales)}"
            )
        return encode(path, target_locale, state.config)

    def _forward(
        self,
        method: NavigationMethod,
        path: Optional[str],
        options: Optional[dict[str, Any]],
        locale: Optional[str],
    ) -> None:
        localized = self._localize(path, locale)
        logger.debug(f"{method.value} {path} -> {localized}")

        if method == NavigationMethod.PUSH:
            self.host.push(localized, options)
        elif method == NavigationMethod.REPLACE:
            self.host.replace(localized, options)
        elif method == NavigationMethod.PREFETCH:
            self.host.prefetch(localized)

    def navigate(self, intent: NavigationIntent) -> None:
        """Execute a navigation intent against the host router."""
        if intent.method == NavigationMethod.BACK:
            self.back()
            return
        self._forward(intent.method, intent.path, intent.options, intent.locale)

    def push(
        self,
        path: str,
        options: Optional[dict[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> None:
        """Navigate to a canonical path, adding a history entry."""
        self._forward(NavigationMethod.PUSH, path, options, locale)

    def replace(
        self,
        path: str,
        options: Optional[dict[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> None:
        """Navigate to a canonical path, replacing the current history entry."""
        self._forward(NavigationMethod.REPLACE, path, options, locale)

    def prefetch(self, path: str, locale: Optional[str] = None) -> None:
        self._forward(NavigationMethod.PREFETCH, path, None, locale)

    def back(self) -> None:
        # Nothing to encode; the observer resolves the resulting location
        logger.debug("back")
        self.host.back()

    def href(self, path: str, locale: Optional[str] = None) -> str:
        """
        Localized href for a link, without navigating.

        External hrefs (absolute or protocol-relative URLs) are returned
        unchanged.
        """
        if not is_local_href(path):
            return path
        return self._localize(path, locale)
