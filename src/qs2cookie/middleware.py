"""ASGI middleware — copies query string pairs into cookies on the response.

Wraps any ASGI application. The cookies are appended to the
``http.response.start`` message whatever its status, so redirects and
error pages carry them too (a tracking redirect is the typical use).

Usage::

    from qs2cookie import CookieConfig, QS2CookieMiddleware

    app = QS2CookieMiddleware(app, CookieConfig(
        domain=".example.com",
        expires=86400,
        ignore=("session",),
    ))

Per-path configuration, the longest matching prefix wins::

    app = QS2CookieMiddleware(
        app,
        CookieConfig(),
        overrides=[("/campaign", CookieConfig(cookie_name_from="cid"))],
    )
"""

import logging
import time
from collections.abc import Callable, Iterable

from qs2cookie._internal.asgi import ASGIApp, HTTPScope, Message, Receive, Scope, Send
from qs2cookie.config import CookieConfig
from qs2cookie.http.headers import append_headers
from qs2cookie.pipeline import QueryRequest, transform

logger = logging.getLogger("qs2cookie.middleware")

# Set on a scope once a middleware instance has handled it; a nested
# instance seeing it treats the call as a subrequest.
SCOPE_MARKER = "qs2cookie.main"


def _normalize_prefix(prefix: str) -> str:
    if not prefix.startswith("/"):
        prefix = "/" + prefix
    return prefix.rstrip("/") or "/"


def _prefix_matches(prefix: str, path: str) -> bool:
    if prefix == "/":
        return True
    return path == prefix or path.startswith(prefix + "/")


class QS2CookieMiddleware:
    """Set cookies from the query string of every top-level HTTP request.

    Args:
        app: The wrapped ASGI application.
        config: Configuration for paths without an override.
        overrides: ``(path_prefix, config)`` pairs; the longest prefix
            matching the request path on a segment boundary applies.
        clock: Wall clock, used for the request time and the
            encode-in-key timestamp.
    """

    __slots__ = ("_clock", "_overrides", "app", "config")

    def __init__(
        self,
        app: ASGIApp,
        config: CookieConfig | None = None,
        *,
        overrides: Iterable[tuple[str, CookieConfig]] = (),
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.app = app
        self.config = config or CookieConfig()
        self._overrides = tuple(
            sorted(
                ((_normalize_prefix(prefix), cfg) for prefix, cfg in overrides),
                key=lambda item: len(item[0]),
                reverse=True,
            )
        )
        self._clock = clock

    def config_for(self, path: str) -> CookieConfig:
        """Return the configuration that applies to *path*."""
        for prefix, cfg in self._overrides:
            if _prefix_matches(prefix, path):
                return cfg
        return self.config

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_time = self._clock()
        subrequest = bool(scope.get(SCOPE_MARKER))
        scope[SCOPE_MARKER] = True

        http = HTTPScope.from_scope(scope)
        outcome = transform(
            QueryRequest(
                query=http.query,
                request_time=request_time,
                dnt="dnt" in http.headers,
                subrequest=subrequest,
            ),
            self.config_for(http.path),
            clock=self._clock,
        )
        additions = outcome.headers()
        if not additions:
            await self.app(scope, receive, send)
            return

        logger.debug("%s: adding %d header(s)", http.path, len(additions))

        async def send_with_cookies(message: Message) -> None:
            if message["type"] == "http.response.start":
                message = dict(message)
                message["headers"] = append_headers(message.get("headers", ()), additions)
            await send(message)

        await self.app(scope, receive, send_with_cookies)
