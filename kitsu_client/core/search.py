"""Query builder for search endpoints."""

from typing import Any, Tuple
from urllib.parse import quote


class Search:
    """An ordered, immutable set of filter pairs.

    `filter` never mutates the receiver; it returns a new `Search` with the
    pair appended, so calls chain:

        Search().filter("text", "non non biyori").filter("page[limit]", 5)

    Keys are not checked against any vocabulary and duplicate keys are kept.
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Tuple[Tuple[str, str], ...] = ()):
        self._pairs = tuple(pairs)

    def filter(self, key: str, value: Any) -> "Search":
        return Search(self._pairs + ((str(key), str(value)),))

    @property
    def pairs(self) -> Tuple[Tuple[str, str], ...]:
        return self._pairs

    @property
    def query(self) -> str:
        """Percent-encoded `key=value` pairs joined with `&`, in insertion order."""
        return "&".join(f"{quote(k, safe='')}={quote(v, safe='')}" for k, v in self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Search):
            return NotImplemented
        return self._pairs == other._pairs

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __repr__(self) -> str:
        return f"Search({list(self._pairs)!r})"

    def __str__(self) -> str:
        return self.query
