"""Raw query string tokenizing and pair validation.

Unlike ``urllib.parse.parse_qs`` nothing is decoded here: ``%xx``
sequences and ``+`` stay exactly as the client sent them, and pair order
is preserved.
"""

import logging
from collections.abc import Iterator
from typing import NamedTuple

logger = logging.getLogger("qs2cookie.transform")


class RawPair(NamedTuple):
    """A ``key=value`` pair split at the first ``=`` of a query token."""

    key: str
    value: str


def decode_query(query_string: bytes) -> str:
    """Decode ASGI query bytes one-to-one so no raw byte is lost."""
    return query_string.decode("latin-1")


def split_query(query: str | None) -> tuple[str, ...]:
    """Split a query string on ``&``, dropping empty tokens.

    Returns an empty tuple for ``None`` or ``""``.
    """
    if not query:
        return ()
    return tuple(token for token in query.split("&") if token)


def parse_pair(token: str) -> RawPair | None:
    """Split *token* at its first ``=``.

    Returns ``None`` when the token has no ``=`` or starts with one
    (empty key). Further ``=`` characters belong to the value.
    """
    key, sep, value = token.partition("=")
    if not sep or not key:
        return None
    return RawPair(key, value)


def iter_pairs(query: str | None) -> Iterator[RawPair]:
    """Yield the valid pairs of *query* in order, skipping garbage tokens."""
    for token in split_query(query):
        pair = parse_pair(token)
        if pair is None:
            logger.debug("invalid pair skipped: %r", token)
            continue
        yield pair
