"""
Path localization endpoints.

All endpoints read the locale context established by LocaleMiddleware, so
/fr/api/paths/localize?path=/about localizes for "fr" unless an explicit
locale is given.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from src.domain.errors import ConfigError
from src.domain.models import LocaleState
from src.domain.schemas import (
    ActiveLocaleResponse,
    ErrorResponse,
    LocalesResponse,
    LocalizedPathResponse,
    UnlocalizedPathResponse,
)
from src.i18n.locale import read
from src.i18n.paths import decode, encode, has_locale_prefix, switch_locale

router = APIRouter(tags=["locales"], responses={400: {"model": ErrorResponse}})


async def get_locale_state() -> LocaleState:
    """Locale context of the current request."""
    return read()


def _target_locale(state: LocaleState, locale: Optional[str]) -> str:
    target = locale if locale is not None else state.active_locale
    if not state.config.is_supported(target):
        raise ConfigError(f"Locale {target!r} is not one of {list(state.config.locales)}")
    return target


@router.get("/locales", response_model=LocalesResponse)
async def get_locales(state: LocaleState = Depends(get_locale_state)) -> LocalesResponse:
    """List the configured locales."""
    return LocalesResponse(
        locales=list(state.config.locales),
        default_locale=state.config.default_locale,
        prefix_default=state.config.prefix_default,
    )


@router.get("/locale", response_model=ActiveLocaleResponse)
async def get_active_locale(
    request: Request,
    state: LocaleState = Depends(get_locale_state),
) -> ActiveLocaleResponse:
    """Active locale and canonical path of this request."""
    return ActiveLocaleResponse(
        locale=state.active_locale,
        canonical_path=request.state.canonical_path,
    )


@router.get("/paths/localize", response_model=LocalizedPathResponse)
async def localize_path(
    path: str = Query(description="Canonical path, may include query and fragment"),
    locale: Optional[str] = Query(default=None, description="Target locale, defaults to the active locale"),
    state: LocaleState = Depends(get_locale_state),
) -> LocalizedPathResponse:
    target = _target_locale(state, locale)
    return LocalizedPathResponse(
        path=encode(path, target, state.config),
        locale=target,
        canonical=path,
    )


@router.get("/paths/unlocalize", response_model=UnlocalizedPathResponse)
async def unlocalize_path(
    path: str = Query(description="Localized path as shown in the address bar"),
    state: LocaleState = Depends(get_locale_state),
) -> UnlocalizedPathResponse:
    decoded = decode(path, state.config)
    return UnlocalizedPathResponse(
        path=path,
        locale=decoded.locale,
        canonical=decoded.canonical,
        prefixed=has_locale_prefix(path, decoded.locale),
    )


@router.get("/paths/switch", response_model=LocalizedPathResponse)
async def switch_path_locale(
    path: str = Query(description="Localized path of the current page"),
    locale: str = Query(description="Locale to switch to"),
    state: LocaleState = Depends(get_locale_state),
) -> LocalizedPathResponse:
    """Where the page at `path` lives in another locale."""
    target = _target_locale(state, locale)
    return LocalizedPathResponse(
        path=switch_locale(path, target, state.config),
        locale=target,
        canonical=decode(path, state.config).canonical,
    )
