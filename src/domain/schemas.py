"""
Request/Response schemas for API endpoints.
"""
from pydantic import BaseModel, Field


class LocalesResponse(BaseModel):
    """Configured locales."""
    locales: list[str] = Field(description="Supported locale identifiers")
    default_locale: str = Field(description="Locale used for unprefixed paths")
    prefix_default: bool = Field(description="Whether the default locale is prefixed too")


class ActiveLocaleResponse(BaseModel):
    """Locale context of the current request."""
    locale: str = Field(description="Active locale decoded from the request path")
    canonical_path: str = Field(description="Request path without the locale segment")


class LocalizedPathResponse(BaseModel):
    """Result of localizing a canonical path."""
    path: str = Field(description="Localized path")
    locale: str = Field(description="Locale the path was localized for")
    canonical: str = Field(description="Canonical input path")


class UnlocalizedPathResponse(BaseModel):
    """Result of decoding a localized path."""
    path: str = Field(description="Localized input path")
    locale: str = Field(description="Locale found in the path, or the default locale")
    canonical: str = Field(description="Path without the locale segment")
    prefixed: bool = Field(description="Whether the path carried a locale prefix")


class ErrorResponse(BaseModel):
    """Error body returned for locale routing errors."""
    code: str
    message: str
