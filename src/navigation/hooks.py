"""
Accessors used by application code.

use_localized_router() and use_unlocalized_pathname() are the two entry
points for navigation. LocaleCapabilities bundles them for injection at the
composition root.
"""
from typing import Optional

from src.i18n.locale import LocaleContext, resolve
from src.navigation.pathname import UnlocalizedPathnameObserver
from src.navigation.router import HostRouter, LocalizedRouter


def use_locale(context: Optional[LocaleContext] = None) -> str:
    """Active locale of the given or current context."""
    return resolve(context).active_locale


def use_localized_router(
    host: HostRouter, context: Optional[LocaleContext] = None
) -> LocalizedRouter:
    """Router facade that navigates with canonical paths."""
    return LocalizedRouter(host, context)


def use_unlocalized_pathname(
    host: HostRouter, context: Optional[LocaleContext] = None
) -> str:
    """Canonical pathname of the host router's current location."""
    return UnlocalizedPathnameObserver(host, context).pathname


class LocaleCapabilities:
    """
    Locale and routing capabilities for one render tree.

    Built once where the host router and the locale context are known, then
    passed to whatever needs them.
    """

    def __init__(self, host: HostRouter, context: Optional[LocaleContext] = None):
        self.host = host
        self.context = context
        self._router = LocalizedRouter(host, context)
        self._observer = UnlocalizedPathnameObserver(host, context)

    def read_locale(self) -> str:
        return use_locale(self.context)

    def read_router(self) -> LocalizedRouter:
        return self._router

    def read_pathname(self) -> str:
        return self._observer.pathname

    @property
    def observer(self) -> UnlocalizedPathnameObserver:
        return self._observer
