from __future__ import annotations

from collections.abc import Iterable

from .located import Located
from .position import Position


class Tagged:
    """Iterator of characters tagged with the location each one occurs at.

    >>> it = Tagged("ab\\ncd")
    >>> [(ch, str(pos)) for ch, pos in it]
    [('a', '1:1'), ('b', '1:2'), ('\\n', '1:3'), ('c', '2:1'), ('d', '2:2')]
    """

    __slots__ = ("_located",)

    def __init__(self, chars: Iterable[str]) -> None:
        self._located = Located(chars)

    @property
    def located(self) -> Located:
        return self._located

    def __iter__(self) -> Tagged:
        return self

    def __next__(self) -> tuple[str, Position]:
        pos = self._located.position()
        return next(self._located), pos

    def count(self) -> int:
        return self._located.count()

    def size_hint(self) -> tuple[int, int | None]:
        return self._located.size_hint()

    def __length_hint__(self) -> int:
        return self._located.__length_hint__()
