"""The query string to cookie transformation.

``transform()`` is a pure function of the request facts and a
``CookieConfig``. It never raises for query input and never touches
shared state, so one configuration can serve any number of concurrent
requests::

    from qs2cookie import CookieConfig, QueryRequest, transform

    outcome = transform(QueryRequest(query="a=1&b=2"), CookieConfig())
    outcome.headers()
    # [("Set-Cookie", "qs2cookie=a|1^b|2; path=/; ")]
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum

from qs2cookie.composer import make_packer
from qs2cookie.config import CookieConfig, PackingMode
from qs2cookie.http.cookies import SetCookie
from qs2cookie.http.query import iter_pairs
from qs2cookie.pairs import KeyFilter, NameResolver

logger = logging.getLogger("qs2cookie.transform")

DIAGNOSTIC_HEADER = "X-QS2Cookie"


class Declined(StrEnum):
    """Why a request was left untouched. None of these is an error."""

    DISABLED = "disabled"
    SUBREQUEST = "subrequest"
    NO_QUERY = "no query string"
    DNT = "DNT header present"


@dataclass(frozen=True, slots=True)
class QueryRequest:
    """The request facts the transformation depends on.

    ``request_time`` is the Unix time the request was received; it
    anchors the ``expires`` attribute. It defaults to "now".
    """

    query: str | None
    request_time: float = field(default_factory=time.time)
    dnt: bool = False
    subrequest: bool = False


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of one transformation.

    Exactly one of three shapes:

    - declined: ``declined`` is set, nothing else.
    - cookies: zero or more ``cookies``, no ``diagnostic``.
    - missing name: no cookies, ``diagnostic`` carries the error text.
    """

    cookies: tuple[SetCookie, ...] = ()
    diagnostic: str | None = None
    declined: Declined | None = None

    def headers(self) -> list[tuple[str, str]]:
        """Response headers to append, in emission order."""
        headers = [("Set-Cookie", cookie.to_header_value()) for cookie in self.cookies]
        if self.diagnostic is not None:
            headers.append((DIAGNOSTIC_HEADER, self.diagnostic))
        return headers


def check_declined(request: QueryRequest, config: CookieConfig) -> Declined | None:
    """Return the reason to skip *request*, or None to process it."""
    if not config.enabled:
        return Declined.DISABLED
    if request.subrequest:
        return Declined.SUBREQUEST
    if not request.query:
        return Declined.NO_QUERY
    if request.dnt and not config.enabled_if_dnt:
        return Declined.DNT
    return None


def missing_name_message(param: str) -> str:
    """Diagnostic text for a ``cookie_name_from`` parameter absent from the query."""
    return f"ERROR: Did not detect cookie name - missing QS argument: {param}"


def transform(
    request: QueryRequest,
    config: CookieConfig,
    *,
    clock: Callable[[], float] = time.time,
) -> Outcome:
    """Turn the query string of *request* into ``Set-Cookie`` values.

    Args:
        request: Query string and request facts.
        config: Resolved configuration for this request.
        clock: Wall clock used for the encode-in-key timestamp.

    Returns:
        An ``Outcome``; see its docstring for the possible shapes.
    """
    reason = check_declined(request, config)
    if reason is not None:
        logger.debug("declined: %s", reason)
        return Outcome(declined=reason)

    packer = make_packer(config, request_time=request.request_time, clock=clock)
    key_filter = KeyFilter(config.ignore)
    resolver = (
        NameResolver(config.cookie_name_from, config.prefix)
        if config.cookie_name_from and config.packing is PackingMode.AGGREGATED
        else None
    )

    seen = False
    for pair in iter_pairs(request.query):
        seen = True
        if resolver is not None and resolver.consume(pair):
            continue
        if key_filter.is_ignored(pair.key):
            logger.debug("pair %r is on the ignore list", pair.key)
            continue
        packer.add(pair)

    if resolver is not None and config.cookie_name_from:
        if resolver.name is None:
            logger.info("cookie name parameter %r missing from query", config.cookie_name_from)
            return Outcome(diagnostic=missing_name_message(config.cookie_name_from))
        name = resolver.name
    else:
        name = config.default_name

    if not seen:
        # Only garbage tokens: nothing worth a cookie.
        return Outcome()
    return Outcome(cookies=packer.cookies(name))
