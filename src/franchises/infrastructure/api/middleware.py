"""ASGI middleware for the franchise API."""

from __future__ import annotations

from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class PathScopedCORSMiddleware:
    """Apply Starlette's CORS handling only to paths under ``path_prefix``.

    Requests for any other path (``/``, ``/health``, ``/docs``) pass straight
    through without CORS headers.
    """

    def __init__(self, app: ASGIApp, path_prefix: str, **cors_options) -> None:
        self.app = app
        self.path_prefix = path_prefix.rstrip("/")
        self.cors = CORSMiddleware(app, **cors_options)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and self._in_scope(scope["path"]):
            await self.cors(scope, receive, send)
        else:
            await self.app(scope, receive, send)

    def _in_scope(self, path: str) -> bool:
        return path == self.path_prefix or path.startswith(self.path_prefix + "/")
