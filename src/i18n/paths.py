"""
Conversion between canonical and localized paths.

A canonical path never carries a locale segment (`/about`). A localized path
is what the browser shows and may be prefixed with a locale (`/fr/about`).
All functions here are pure: they only inspect the path component and keep
query strings and fragments verbatim.
"""

import logging
import re

from src.domain.models import DecodedPath, LocaleConfig

logger = logging.getLogger(__name__)

# RFC 3986 scheme, e.g. "https:", "mailto:"
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")


def split_path(href: str) -> tuple[str, str]:
    """
    Split an href into its path and the trailing query/fragment.

    Args:
        href: Path optionally followed by "?query" and/or "#fragment"

    Returns:
        Tuple of (path, suffix) where suffix starts with "?" or "#" or is empty

    Example:
        >>> split_path("/about?x=1#y")
        ("/about", "?x=1#y")
    """
    cut = len(href)
    for marker in ("?", "#"):
        index = href.find(marker)
        if index != -1 and index < cut:
            cut = index
    return href[:cut], href[cut:]


def normalize_path(path: str) -> str:
    """Ensure a path starts with '/'."""
    if not path.startswith("/"):
        return "/" + path
    return path


def is_local_href(href: str) -> bool:
    """
    Whether an href points inside the application.

    Absolute URLs ("https://...", "mailto:...") and protocol-relative URLs
    ("//cdn.example.com/...") are external and must never be localized.
    """
    if not href:
        return False
    if href.startswith("//"):
        return False
    return _SCHEME_RE.match(href) is None


def has_locale_prefix(path: str, locale: str) -> bool:
    """Whether the path component is `/{locale}` or starts with `/{locale}/`."""
    pathname, _ = split_path(normalize_path(path))
    prefix = f"/{locale}"
    return pathname == prefix or pathname.startswith(prefix + "/")


def encode(canonical: str, locale: str, config: LocaleConfig) -> str:
    """
    Turn a canonical path into the localized path for `locale`.

    The default locale stays unprefixed unless `config.prefix_default` is set.
    The root path maps to `/{locale}` without a trailing slash.

    Args:
        canonical: Canonical path, may include query and fragment
        locale: Locale to encode for
        config: Locale configuration

    Returns:
        Localized path

    Example:
        >>> encode("/about?x=1#y", "fr", config)
        "/fr/about?x=1#y"
    """
    pathname, suffix = split_path(canonical)
    pathname = normalize_path(pathname)

    if locale == config.default_locale and not config.prefix_default:
        return pathname + suffix

    if pathname == "/":
        return f"/{locale}{suffix}"
    return f"/{locale}{pathname}{suffix}"


def decode(localized: str, config: LocaleConfig) -> DecodedPath:
    """
    Split a localized path into its locale and canonical path.

    Only an exact match of the first path segment against a configured
    locale counts as a prefix. Anything else resolves to the default locale
    with the path left unchanged. Never raises.

    Args:
        localized: Path as shown in the address bar
        config: Locale configuration

    Returns:
        DecodedPath with the locale and canonical path
    """
    pathname, suffix = split_path(localized)
    pathname = normalize_path(pathname)

    segment, separator, rest = pathname[1:].partition("/")
    if segment in config.locales:
        canonical = "/" + rest if separator else "/"
        return DecodedPath(locale=segment, canonical=canonical + suffix)

    return DecodedPath(locale=config.default_locale, canonical=pathname + suffix)


def switch_locale(localized: str, locale: str, config: LocaleConfig) -> str:
    """
    Compute where the page currently shown at `localized` lives in `locale`.

    Used by language switchers: "/fr/about" switched to "de" gives
    "/de/about", switched to the unprefixed default gives "/about".
    """
    decoded = decode(localized, config)
    target = encode(decoded.canonical, locale, config)
    logger.debug(f"Switching {localized} from {decoded.locale} to {locale}: {target}")
    return target
