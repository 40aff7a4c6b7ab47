"""Cookie value escaping, cookie dates and Set-Cookie serialization.

The escaping is the classic form-urlencoding used by Apache's libapreq:
``A-Z a-z 0-9 - . _ ~`` pass through, a space becomes ``+`` and every
other byte becomes ``%XX``. That removes every tspecial (``;``, ``,``,
``=``, whitespace, quotes) plus control and non-ASCII bytes from the
result.
"""

import time
from dataclasses import dataclass
from urllib.parse import quote_plus

# Fixed English names; strftime would follow the process locale.
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# 9999-12-31 23:59:59 UTC, the last instant a cookie date can name.
LAST_COOKIE_DATE = 253402300799


def escape(text: str) -> str:
    """Percent-escape *text* for use inside a cookie value.

    *text* is expected to carry raw bytes as latin-1 code points (see
    ``decode_query``), so each code point maps back to exactly one byte.
    Code points above U+00FF are encoded as UTF-8.
    """
    try:
        return quote_plus(text, safe="", encoding="latin-1")
    except UnicodeEncodeError:
        return quote_plus(text, safe="", encoding="utf-8")


def format_cookie_date(timestamp: float) -> str:
    """Format *timestamp* as a Netscape cookie date.

    ``Wdy, DD-Mon-YY HH:MM:SS GMT``, the two-digit-year form understood
    by every browser, including old ones that ignore ``Max-Age``. Times
    past ``LAST_COOKIE_DATE`` are clamped to it.
    """
    tm = time.gmtime(min(int(timestamp), LAST_COOKIE_DATE))
    return (
        f"{_WEEKDAYS[tm.tm_wday]}, {tm.tm_mday:02d}-{_MONTHS[tm.tm_mon - 1]}-"
        f"{tm.tm_year % 100:02d} {tm.tm_hour:02d}:{tm.tm_min:02d}:{tm.tm_sec:02d} GMT"
    )


@dataclass(frozen=True, slots=True)
class CookieAttributes:
    """Attributes shared by every cookie emitted for one request."""

    path: str = "/"
    domain: str = ""
    expires: str = ""  # Pre-formatted cookie date, empty for a session cookie

    @classmethod
    def for_request(
        cls, *, path: str, domain: str, expires: int, request_time: float
    ) -> "CookieAttributes":
        """Build the attributes for a request served at *request_time*."""
        expires_at = format_cookie_date(request_time + expires) if expires > 0 else ""
        return cls(path=path, domain=domain, expires=expires_at)

    def to_suffix(self) -> str:
        """Serialize to the text following ``name=value``."""
        parts = [f"; path={self.path}; "]
        if self.domain:
            parts.append(f"domain={self.domain}; ")
        if self.expires:
            parts.append(f"expires={self.expires}")
        return "".join(parts)


@dataclass(frozen=True, slots=True)
class SetCookie:
    """A composed ``Set-Cookie`` value.

    ``name`` may itself carry packed data (encode-in-key mode), so no
    validation happens here.
    """

    name: str
    value: str
    attributes: CookieAttributes = CookieAttributes()

    def to_header_value(self) -> str:
        """Serialize to a ``Set-Cookie`` header value string."""
        return f"{self.name}={self.value}{self.attributes.to_suffix()}"
