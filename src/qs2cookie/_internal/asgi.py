"""Typed ASGI definitions.

Raw ASGI aliases for the middleware signature, plus a typed view of the
parts of an HTTP scope the transformation reads.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from qs2cookie.http.headers import Headers
from qs2cookie.http.query import decode_query

# Raw ASGI callables and messages
Scope: TypeAlias = MutableMapping[str, Any]
Message: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[Message]]
Send: TypeAlias = Callable[[Message], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """Typed HTTP scope parsed from raw ASGI scope dict.

    Internal only -- the middleware builds one per request.
    """

    path: str
    query: str
    headers: Headers

    @classmethod
    def from_scope(cls, scope: Scope) -> "HTTPScope":
        """Parse raw ASGI scope into typed object."""
        return cls(
            path=scope.get("path", "/"),
            query=decode_query(scope.get("query_string", b"")),
            headers=Headers(scope.get("headers", ())),
        )
