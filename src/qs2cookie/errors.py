"""qs2cookie exception hierarchy.

The transformation itself never raises for query input; these types
cover configuration and integration mistakes made by the host.
"""


class QS2CookieError(Exception):
    """Base for all qs2cookie-specific errors."""


class ConfigurationError(QS2CookieError):
    """Raised when a ``CookieConfig`` is invalid.

    Raised from ``CookieConfig.__post_init__``, so an invalid
    configuration never reaches a request.
    """
