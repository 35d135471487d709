"""
Error taxonomy for locale routing.

All of these are programmer errors (misconfiguration or misuse). They are
raised immediately and never retried.
"""


class LocaleRoutingError(ValueError):
    """Base class for locale routing errors."""

    code = "LOCALE_ROUTING_ERROR"


class ConfigError(LocaleRoutingError):
    """Locale configuration is invalid or the active locale is not configured."""

    code = "LOCALE_CONFIG_INVALID"


class NotProvidedError(LocaleRoutingError):
    """The locale context was read outside of any provider."""

    code = "LOCALE_CONTEXT_NOT_PROVIDED"


class InvalidPathError(LocaleRoutingError):
    """A navigation path does not start with '/'."""

    code = "INVALID_PATH"
