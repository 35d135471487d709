"""
Internationalization (i18n) module for locale-aware routing.

This module provides:
- Conversion between canonical and localized paths
- Locale context establishment and lookup
- Middleware for FastAPI
"""

from src.i18n.paths import (
    encode,
    decode,
    split_path,
    is_local_href,
    has_locale_prefix,
    switch_locale,
)
from src.i18n.locale import (
    LocaleContext,
    provide,
    read,
    current_context,
)
from src.i18n.middleware import LocaleMiddleware

__all__ = [
    "encode",
    "decode",
    "split_path",
    "is_local_href",
    "has_locale_prefix",
    "switch_locale",
    "LocaleContext",
    "provide",
    "read",
    "current_context",
    "LocaleMiddleware",
]
