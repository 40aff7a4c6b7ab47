"""qs2cookie — copy query string parameters into cookies.

Turns ``?utm_source=mail&cid=42`` into ``Set-Cookie`` headers under a
configurable policy: ignore list, escaping, size limit, delimiters and
naming. The core is a pure function; ``QS2CookieMiddleware`` plugs it
into any ASGI application.

Basic usage::

    from qs2cookie import CookieConfig, QS2CookieMiddleware

    app = QS2CookieMiddleware(app, CookieConfig(expires=86400))

Without a server::

    from qs2cookie import CookieConfig, QueryRequest, transform

    transform(QueryRequest(query="a=1&b=2"), CookieConfig()).headers()
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "CookieConfig",
    "Declined",
    "Outcome",
    "PackingMode",
    "QS2CookieError",
    "QS2CookieMiddleware",
    "QueryRequest",
    "transform",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import qs2cookie`` fast while providing a clean top-level API.
    """
    if name in ("CookieConfig", "PackingMode"):
        from qs2cookie import config as _config

        return getattr(_config, name)

    if name in ("Declined", "Outcome", "QueryRequest", "transform"):
        from qs2cookie import pipeline as _pipeline

        return getattr(_pipeline, name)

    if name == "QS2CookieMiddleware":
        from qs2cookie.middleware import QS2CookieMiddleware

        return QS2CookieMiddleware

    if name in ("ConfigurationError", "QS2CookieError"):
        from qs2cookie import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
