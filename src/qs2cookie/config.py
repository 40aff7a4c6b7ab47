"""Cookie configuration.

CookieConfig is a frozen dataclass — immutable after creation, validated
once at construction, shared read-only by every request it applies to.
"""

import time
from dataclasses import dataclass
from enum import StrEnum

from qs2cookie.errors import ConfigurationError
from qs2cookie.http.cookies import LAST_COOKIE_DATE


class PackingMode(StrEnum):
    """How surviving query pairs are packed into ``Set-Cookie`` headers."""

    AGGREGATED = "aggregated"  # one cookie, delimiter-joined, escaped
    PER_PAIR = "per-pair"  # one cookie per pair, unescaped


@dataclass(frozen=True, slots=True)
class CookieConfig:
    """Query string to cookie configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = CookieConfig(
            domain=".example.com",
            expires=86400,
            ignore=("session", "token"),
        )
    """

    # Gating
    enabled: bool = True
    enabled_if_dnt: bool = False

    # Naming
    cookie_name: str = "qs2cookie"
    cookie_name_from: str | None = None  # Query parameter that supplies the name
    prefix: str = ""  # Prepended to the cookie name (aggregated) or each key (per-pair)

    # Packing
    packing: PackingMode = PackingMode.AGGREGATED
    encode_in_key: bool = False
    pair_delimiter: str = "^"
    key_value_delimiter: str = "|"
    ignore: tuple[str, ...] = ()

    # Limits
    max_size: int = 1024  # Browsers keep roughly 4k per domain

    # Attributes
    expires: int = 0  # Seconds after the request; <= 0 means a session cookie
    domain: str = ""
    path: str = "/"

    def __post_init__(self) -> None:
        # Accept lists/sets from callers while keeping the field hashable.
        if isinstance(self.ignore, str):
            object.__setattr__(self, "ignore", (self.ignore,))
        elif not isinstance(self.ignore, tuple):
            object.__setattr__(self, "ignore", tuple(self.ignore))
        if not isinstance(self.packing, PackingMode):
            try:
                object.__setattr__(self, "packing", PackingMode(self.packing))
            except ValueError:
                msg = f"Unknown packing mode {self.packing!r}."
                raise ConfigurationError(msg) from None
        self._validate()

    def _validate(self) -> None:
        for field_name in ("pair_delimiter", "key_value_delimiter"):
            value = getattr(self, field_name)
            if not value:
                msg = f"CookieConfig.{field_name} must not be empty."
                raise ConfigurationError(msg)
            if "=" in value:
                msg = f"CookieConfig.{field_name} may not contain '=' -- illegal in cookie values."
                raise ConfigurationError(msg)

        if self.domain:
            if not self.domain.startswith("."):
                msg = "CookieConfig.domain must begin with a dot."
                raise ConfigurationError(msg)
            if "." not in self.domain[1:]:
                msg = "CookieConfig.domain must contain at least one embedded dot."
                raise ConfigurationError(msg)

        if not self.cookie_name:
            msg = "CookieConfig.cookie_name must not be empty."
            raise ConfigurationError(msg)
        if self.cookie_name_from == "":
            msg = "CookieConfig.cookie_name_from must be None or a parameter name."
            raise ConfigurationError(msg)
        if self.max_size < 0:
            msg = f"CookieConfig.max_size must be a non-negative number, not {self.max_size}."
            raise ConfigurationError(msg)
        if self.expires > LAST_COOKIE_DATE - time.time():
            msg = f"CookieConfig.expires={self.expires} puts the cookie date past year 9999."
            raise ConfigurationError(msg)
        if not self.path:
            msg = "CookieConfig.path must not be empty."
            raise ConfigurationError(msg)

    @property
    def default_name(self) -> str:
        """Cookie name used when no name is taken from the query string."""
        return self.prefix + self.cookie_name
