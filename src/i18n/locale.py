"""
Locale context: the active locale and configuration visible to descendants.

Provides:
- LocaleContext handle for establishing and tearing down a context
- provide() / read() / current_context() for providers and consumers

The context lives in a ContextVar so every asyncio task (one per request)
sees its own value, and nested providers only affect code running inside
them.
"""

from typing import Optional
from contextvars import ContextVar, Token
import logging

from src.domain.errors import ConfigError, NotProvidedError
from src.domain.models import LocaleConfig, LocaleState

logger = logging.getLogger(__name__)

# Context variable for the innermost established locale context
_current_context: ContextVar[Optional["LocaleContext"]] = ContextVar(
    "current_locale_context", default=None
)


class LocaleContext:
    """
    Handle for one established locale context.

    The active locale is fixed for the lifetime of the handle. Switching
    locale means establishing a new context higher up, never mutating this
    one. Handles can be read directly (explicit context passing) or
    activated so that read() finds them.

    Usage:
        with provide(config, "fr"):
            read().active_locale  # "fr"
    """

    def __init__(self, config: LocaleConfig, active_locale: str):
        if not config.is_supported(active_locale):
            raise ConfigError(
                f"Active locale {active_locale!r} is not one of {list(config.locales)}"
            )
        self._state = LocaleState(config=config, active_locale=active_locale)
        self._token: Optional[Token] = None

    @property
    def config(self) -> LocaleConfig:
        return self._state.config

    @property
    def active_locale(self) -> str:
        return self._state.active_locale

    @property
    def is_active(self) -> bool:
        """Whether this handle is currently established."""
        return self._token is not None

    def read(self) -> LocaleState:
        """Read this context's state."""
        return self._state

    def activate(self) -> "LocaleContext":
        """Make this handle the current context until teardown()."""
        if self._token is not None:
            raise RuntimeError("Locale context is already established")
        self._token = _current_context.set(self)
        logger.debug(f"Locale context established: {self.active_locale}")
        return self

    def teardown(self) -> None:
        """Restore whichever context was current before activate()."""
        if self._token is None:
            return
        _current_context.reset(self._token)
        self._token = None
        logger.debug(f"Locale context torn down: {self.active_locale}")

    def __enter__(self) -> "LocaleContext":
        if self._token is None:
            self.activate()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()

    def __repr__(self) -> str:
        return f"LocaleContext(active_locale={self.active_locale!r}, locales={list(self.config.locales)!r})"


def provide(config: LocaleConfig, active_locale: str) -> LocaleContext:
    """
    Establish a locale context for the current execution context.

    Args:
        config: Locale configuration
        active_locale: Locale to make active; must be configured

    Returns:
        The established handle; use it as a context manager or call
        teardown() to restore the previous context

    Raises:
        ConfigError: If active_locale is not in config.locales
    """
    return LocaleContext(config, active_locale).activate()


def current_context() -> Optional[LocaleContext]:
    """Get the innermost established context, or None."""
    return _current_context.get()


def read() -> LocaleState:
    """
    Read the innermost established locale context.

    Raises:
        NotProvidedError: If no context has been established
    """
    context = _current_context.get()
    if context is None:
        raise NotProvidedError(
            "No locale context is established. Wrap the caller in provide(config, locale)."
        )
    return context.read()


def resolve(context: Optional[LocaleContext] = None) -> LocaleState:
    """Read an explicitly passed handle, falling back to the current context."""
    if context is not None:
        return context.read()
    return read()
