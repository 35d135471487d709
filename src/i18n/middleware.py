"""
FastAPI middleware that establishes the locale context for each request.

The active locale comes from the request path prefix only (/fr/about ->
"fr"). Header and cookie negotiation is left to the hosting application.
"""

import logging
from urllib.parse import quote

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp, Scope

from src.domain.models import LocaleConfig
from src.i18n.locale import LocaleContext
from src.i18n.paths import decode

logger = logging.getLogger(__name__)


def split_root_path(scope: Scope) -> tuple[str, str]:
    """
    Split the ASGI path into the mount prefix and the application path.

    Servers differ on whether scope["path"] includes root_path, so the
    prefix is only stripped when present.

    Returns:
        Tuple of (root_path prefix, path the application routes on)
    """
    path = scope["path"]
    root_path = scope.get("root_path", "")
    if root_path and (path == root_path or path.startswith(root_path + "/")):
        return root_path, path[len(root_path):] or "/"
    return "", path


class LocaleMiddleware(BaseHTTPMiddleware):
    """
    Middleware to provide the locale context for a request.

    The decoded locale and canonical path are stored in:
    - the locale context (read() / current_context()) for the request
    - request.state.locale and request.state.canonical_path

    With `rewrite=True` the routed path becomes the canonical path, so
    /fr/api/locale is served by the handler registered for /api/locale.
    """

    def __init__(self, app: ASGIApp, config: LocaleConfig, rewrite: bool = True):
        super().__init__(app)
        self.config = config
        self.rewrite = rewrite

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        prefix, path = split_root_path(request.scope)
        decoded = decode(path, self.config)

        request.state.locale = decoded.locale
        request.state.canonical_path = decoded.canonical
        request.state.locale_config = self.config

        if self.rewrite and decoded.canonical != path:
            rewritten = prefix + decoded.canonical
            logger.debug(f"Rewriting {request.scope['path']} -> {rewritten}")
            request.scope["path"] = rewritten
            # raw_path stays percent-encoded like the server sent it
            request.scope["raw_path"] = quote(rewritten).encode("ascii")

        with LocaleContext(self.config, decoded.locale):
            response = await call_next(request)

        response.headers["Content-Language"] = decoded.locale
        return response
