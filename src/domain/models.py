"""
Core domain models for locale-aware routing.
All models use Pydantic v2 for type safety and validation.
"""
from typing import Any, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator


# Characters that would make a locale ambiguous inside a URL path
_FORBIDDEN_LOCALE_CHARS = ("/", "?", "#")


class NavigationMethod(str, Enum):
    """Host router navigation primitive."""
    PUSH = "push"
    REPLACE = "replace"
    BACK = "back"
    PREFETCH = "prefetch"


class LocaleConfig(BaseModel):
    """
    Immutable locale configuration.

    Created once at application start and read-only afterwards.
    `prefix_default` controls whether paths of the default locale carry an
    explicit `/{locale}` prefix.
    """
    model_config = ConfigDict(frozen=True)

    locales: tuple[str, ...] = Field(description="Supported locale identifiers")
    default_locale: str = Field(description="Locale used when a path carries no prefix")
    prefix_default: bool = Field(
        default=False,
        description="Prefix paths of the default locale as well"
    )

    @model_validator(mode="after")
    def check_locales(self) -> "LocaleConfig":
        if not self.locales:
            raise ValueError("At least one locale must be configured")
        if len(set(self.locales)) != len(self.locales):
            raise ValueError(f"Duplicate locales in {list(self.locales)}")
        for locale in self.locales:
            if not locale or any(ch in locale for ch in _FORBIDDEN_LOCALE_CHARS):
                raise ValueError(f"Invalid locale identifier: {locale!r}")
        if self.default_locale not in self.locales:
            raise ValueError(
                f"Default locale {self.default_locale!r} is not one of {list(self.locales)}"
            )
        return self

    def is_supported(self, locale: str) -> bool:
        """Whether `locale` is one of the configured locales."""
        return locale in self.locales


class DecodedPath(BaseModel):
    """Result of decoding a localized path."""
    model_config = ConfigDict(frozen=True)

    locale: str = Field(description="Locale found in the path, or the default locale")
    canonical: str = Field(description="Path with the locale segment removed")


class LocaleState(BaseModel):
    """Snapshot of the locale context visible to a consumer."""
    model_config = ConfigDict(frozen=True)

    config: LocaleConfig
    active_locale: str


class NavigationIntent(BaseModel):
    """
    A navigation request issued by application code.

    `path` is a canonical path and is required for every method except
    `back`. `locale` overrides the active locale for this single navigation.
    """
    method: NavigationMethod = Field(default=NavigationMethod.PUSH)
    path: Optional[str] = Field(default=None, description="Canonical target path")
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Forwarded unmodified to the host router"
    )
    locale: Optional[str] = Field(default=None, description="Target locale override")


class NavigationEvent(BaseModel):
    """Emitted by a host router when a navigation has completed."""
    model_config = ConfigDict(frozen=True)

    method: NavigationMethod
    pathname: str = Field(description="Host pathname after the navigation")
    url: str = Field(description="Full URL (path, query and fragment) after the navigation")
