"""Cookie composition — escaping, size accounting and packing.

Two packers share one interface: ``add(pair)`` folds one surviving pair
in, ``cookies(name)`` returns the finished ``SetCookie`` values.

``AggregatedPacker``
    Escapes key and value, joins them with the key/value delimiter and
    packs all segments into a single cookie, separated by the pair
    delimiter. The packed value (delimiters included) never exceeds
    ``max_size``.

``PerPairPacker``
    One cookie per pair, ``prefix + key = value``, unescaped. A pair is
    kept only while both it and the running total stay strictly below
    ``max_size``. Browsers honour a single pair per ``Set-Cookie`` line,
    which is why this mode exists.
"""

import logging
from collections.abc import Callable
from typing import TypeAlias

from qs2cookie.config import CookieConfig, PackingMode
from qs2cookie.http.cookies import CookieAttributes, SetCookie, escape
from qs2cookie.http.query import RawPair

logger = logging.getLogger("qs2cookie.transform")


class AggregatedPacker:
    """Packs every pair into one cookie value."""

    __slots__ = ("_attributes", "_clock", "_config", "_segments", "_size")

    def __init__(
        self,
        config: CookieConfig,
        attributes: CookieAttributes,
        *,
        clock: Callable[[], float],
    ) -> None:
        self._config = config
        self._attributes = attributes
        self._clock = clock
        self._segments: list[str] = []
        self._size = 0

    @property
    def packed(self) -> str:
        """Segments accepted so far, joined with the pair delimiter."""
        return self._config.pair_delimiter.join(self._segments)

    @property
    def size(self) -> int:
        """Length of ``packed``."""
        return self._size

    def add(self, pair: RawPair) -> bool:
        """Fold *pair* in. Returns False if it was dropped for size."""
        cfg = self._config
        segment = escape(pair.key) + cfg.key_value_delimiter + escape(pair.value)
        joiner = len(cfg.pair_delimiter) if self._segments else 0

        if len(segment) > cfg.max_size or self._size + joiner + len(segment) > cfg.max_size:
            logger.debug(
                "pair too long to add: %r (this: %d total: %d max: %d)",
                segment,
                len(segment),
                self._size,
                cfg.max_size,
            )
            return False

        self._segments.append(segment)
        self._size += joiner + len(segment)
        return True

    def cookies(self, name: str) -> tuple[SetCookie, ...]:
        """Build the single cookie; its value is empty if nothing fit."""
        cfg = self._config
        if cfg.encode_in_key:
            # The data lives in the name; the value only makes it unique.
            return (
                SetCookie(
                    name=f"{name}{cfg.pair_delimiter}{self.packed}",
                    value=str(int(self._clock())),
                    attributes=self._attributes,
                ),
            )
        return (SetCookie(name=name, value=self.packed, attributes=self._attributes),)


class PerPairPacker:
    """Emits one cookie per pair, without escaping."""

    __slots__ = ("_attributes", "_config", "_cookies", "_total")

    def __init__(self, config: CookieConfig, attributes: CookieAttributes) -> None:
        self._config = config
        self._attributes = attributes
        self._cookies: list[SetCookie] = []
        self._total = 0

    def add(self, pair: RawPair) -> bool:
        """Fold *pair* in. Returns False if it was dropped for size."""
        cfg = self._config
        key = cfg.prefix + pair.key
        size = len(key) + 1 + len(pair.value)

        if not (size < cfg.max_size and self._total + size < cfg.max_size):
            logger.debug(
                "pair too long to add: %s=%s (this: %d total: %d max: %d)",
                key,
                pair.value,
                size,
                self._total,
                cfg.max_size,
            )
            return False

        self._cookies.append(SetCookie(name=key, value=pair.value, attributes=self._attributes))
        self._total += size
        return True

    def cookies(self, name: str | None = None) -> tuple[SetCookie, ...]:
        """Return the accepted cookies; *name* is unused in this mode."""
        return tuple(self._cookies)


Packer: TypeAlias = AggregatedPacker | PerPairPacker


def make_packer(
    config: CookieConfig,
    *,
    request_time: float,
    clock: Callable[[], float],
) -> Packer:
    """Create the packer selected by ``config.packing``."""
    attributes = CookieAttributes.for_request(
        path=config.path,
        domain=config.domain,
        expires=config.expires,
        request_time=request_time,
    )
    if config.packing is PackingMode.PER_PAIR:
        return PerPairPacker(config, attributes)
    return AggregatedPacker(config, attributes, clock=clock)
