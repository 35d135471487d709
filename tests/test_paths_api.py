"""
Tests for the locale middleware and path endpoints.
"""
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.paths import router as paths_router
from src.domain.errors import LocaleRoutingError
from src.domain.models import LocaleConfig
from src.main import create_app, locale_routing_error_handler


CONFIG = LocaleConfig(locales=("en", "fr", "de"), default_locale="en", prefix_default=False)

app = create_app(CONFIG)


def _client(target: FastAPI = app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=target), base_url="http://test")


@pytest.mark.asyncio
async def test_list_locales():
    """Configured locales are exposed."""
    async with _client() as client:
        response = await client.get("/api/locales")

    assert response.status_code == 200
    assert response.json() == {
        "locales": ["en", "fr", "de"],
        "default_locale": "en",
        "prefix_default": False,
    }


@pytest.mark.asyncio
async def test_active_locale_from_prefix():
    """A /fr prefix establishes the French context and is routed canonically."""
    async with _client() as client:
        response = await client.get("/fr/api/locale")

    assert response.status_code == 200
    assert response.json() == {"locale": "fr", "canonical_path": "/api/locale"}
    assert response.headers["content-language"] == "fr"


@pytest.mark.asyncio
async def test_active_locale_defaults():
    async with _client() as client:
        response = await client.get("/api/locale")

    assert response.status_code == 200
    assert response.json()["locale"] == "en"
    assert response.headers["content-language"] == "en"


@pytest.mark.asyncio
async def test_localized_root():
    """/fr is served by the root endpoint."""
    async with _client() as client:
        response = await client.get("/fr")

    assert response.status_code == 200
    assert response.json()["name"] == "Locale Router API"
    assert response.headers["content-language"] == "fr"


@pytest.mark.asyncio
async def test_unknown_prefix_is_not_rewritten():
    async with _client() as client:
        response = await client.get("/xx/api/locale")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_localize_uses_active_locale():
    async with _client() as client:
        response = await client.get("/fr/api/paths/localize", params={"path": "/about?x=1#y"})

    assert response.status_code == 200
    assert response.json() == {"path": "/fr/about?x=1#y", "locale": "fr", "canonical": "/about?x=1#y"}


@pytest.mark.asyncio
async def test_localize_with_explicit_locale():
    async with _client() as client:
        response = await client.get("/api/paths/localize", params={"path": "/", "locale": "de"})

    assert response.status_code == 200
    assert response.json()["path"] == "/de"


@pytest.mark.asyncio
async def test_localize_unknown_locale():
    async with _client() as client:
        response = await client.get("/api/paths/localize", params={"path": "/about", "locale": "xx"})

    assert response.status_code == 400
    assert response.json()["code"] == "LOCALE_CONFIG_INVALID"


@pytest.mark.asyncio
async def test_unlocalize():
    async with _client() as client:
        prefixed = await client.get("/api/paths/unlocalize", params={"path": "/fr/about?x=1"})
        plain = await client.get("/api/paths/unlocalize", params={"path": "/xx/about"})

    assert prefixed.json() == {
        "path": "/fr/about?x=1",
        "locale": "fr",
        "canonical": "/about?x=1",
        "prefixed": True,
    }
    assert plain.json() == {
        "path": "/xx/about",
        "locale": "en",
        "canonical": "/xx/about",
        "prefixed": False,
    }


@pytest.mark.asyncio
async def test_switch_locale():
    async with _client() as client:
        to_default = await client.get("/api/paths/switch", params={"path": "/fr/about", "locale": "en"})
        to_german = await client.get("/api/paths/switch", params={"path": "/fr/about", "locale": "de"})

    assert to_default.json() == {"path": "/about", "locale": "en", "canonical": "/about"}
    assert to_german.json()["path"] == "/de/about"


@pytest.mark.asyncio
async def test_missing_middleware_reports_not_provided():
    """Endpoints mounted without LocaleMiddleware fail loudly."""
    bare = FastAPI()
    bare.add_exception_handler(LocaleRoutingError, locale_routing_error_handler)
    bare.include_router(paths_router, prefix="/api")

    async with _client(bare) as client:
        response = await client.get("/api/locales")

    assert response.status_code == 500
    assert response.json()["code"] == "LOCALE_CONTEXT_NOT_PROVIDED"


@pytest.mark.asyncio
async def test_localize_empty_locale_is_rejected():
    """An empty locale is validated, not replaced by the active locale."""
    async with _client() as client:
        response = await client.get("/fr/api/paths/localize", params={"path": "/about", "locale": ""})

    assert response.status_code == 400
    assert response.json()["code"] == "LOCALE_CONFIG_INVALID"
