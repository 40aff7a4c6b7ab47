"""Per-pair decisions: cookie name harvesting and the ignore list.

Both helpers are request-local. A ``NameResolver`` is created fresh for
every request; a ``KeyFilter`` can be built once per configuration and
shared, since it never changes after construction.

Key comparisons fold ASCII letters only, so ``UID`` matches ``uid`` but
``É`` never matches ``é``.
"""

import string

from qs2cookie.http.query import RawPair

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text: str) -> str:
    """Lowercase the ASCII letters of *text*, leaving every other character."""
    return text.translate(_ASCII_LOWER)


class NameResolver:
    """Harvests the cookie name from the query parameter ``param``.

    Every pair whose key matches ``param`` (case-insensitively) is
    consumed; the first one yielding a non-empty name sets it.
    """

    __slots__ = ("_name", "param", "prefix")

    def __init__(self, param: str, prefix: str = "") -> None:
        self.param = ascii_lower(param)
        self.prefix = prefix
        self._name: str | None = None

    def consume(self, pair: RawPair) -> bool:
        """Return True if *pair* names the cookie and must not be packed."""
        if ascii_lower(pair.key) != self.param:
            return False
        if self._name is None and (self.prefix or pair.value):
            self._name = self.prefix + pair.value
        return True

    @property
    def name(self) -> str | None:
        """The resolved cookie name, or None until a non-empty one is seen."""
        return self._name


class KeyFilter:
    """Case-insensitive, whole-key membership test against the ignore list.

    ``user`` never matches ``username``: keys are compared for equality,
    not as prefixes.
    """

    __slots__ = ("_ignored",)

    def __init__(self, ignore: tuple[str, ...] = ()) -> None:
        self._ignored = frozenset(ascii_lower(key) for key in ignore)

    def __bool__(self) -> bool:
        return bool(self._ignored)

    def is_ignored(self, key: str) -> bool:
        """True if *key* is on the ignore list."""
        return ascii_lower(key) in self._ignored
