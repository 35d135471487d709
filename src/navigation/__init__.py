"""
Locale-aware navigation.

This module provides:
- LocalizedRouter facade over a host router
- UnlocalizedPathnameObserver for the canonical pathname
- Accessors for application code
"""

from src.navigation.router import HostRouter, LocalizedRouter
from src.navigation.pathname import UnlocalizedPathnameObserver
from src.navigation.hooks import (
    LocaleCapabilities,
    use_locale,
    use_localized_router,
    use_unlocalized_pathname,
)

__all__ = [
    "HostRouter",
    "LocalizedRouter",
    "UnlocalizedPathnameObserver",
    "LocaleCapabilities",
    "use_locale",
    "use_localized_router",
    "use_unlocalized_pathname",
]
