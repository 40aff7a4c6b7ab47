"""Case-insensitive views over raw ASGI header pairs.

``Headers`` reads request headers (``DNT``) and captured response
headers (``Set-Cookie``, ``X-QS2Cookie``). ``append_headers`` is the
write side: it adds values to an outgoing header list without touching
the ones already there.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import TypeAlias

RawHeaders: TypeAlias = tuple[tuple[bytes, bytes], ...]


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns all values for a header (e.g. multiple ``Set-Cookie``).
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: Iterable[tuple[bytes, bytes]] = ()) -> None:
        object.__setattr__(self, "_raw", tuple(raw))

    def __getitem__(self, key: str) -> str:
        values = self.get_list(key)
        if not values:
            raise KeyError(key)
        return values[0]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = key.lower().encode("latin-1")
        return any(name.lower() == key_lower for name, _ in self._raw)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._raw:
            key = name.decode("latin-1").lower()
            if key not in seen:
                seen.add(key)
                yield key

    def __len__(self) -> int:
        return len(set(self))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self.get_list(k)!r}" for k in self)
        return f"Headers({{{items}}})"

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*, in the order they were sent."""
        key_lower = key.lower().encode("latin-1")
        return [value.decode("latin-1") for name, value in self._raw if name.lower() == key_lower]

    @property
    def raw(self) -> RawHeaders:
        """Access raw header byte pairs for ASGI compatibility."""
        return self._raw


def append_headers(
    raw: Iterable[tuple[bytes, bytes]], additions: Iterable[tuple[str, str]]
) -> list[tuple[bytes, bytes]]:
    """Return a new raw header list with *additions* appended.

    Existing values are kept; header names are lowercased as ASGI
    servers expect.
    """
    result = list(raw)
    result.extend(
        (name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in additions
    )
    return result
