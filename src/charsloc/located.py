from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator

from .position import Position


class Located:
    """Iterator over characters that also tracks the location of the next one.

    >>> it = Located("ab\\nd")
    >>> it.position(), next(it)
    (Position(line=1, column=1), 'a')
    >>> next(it), next(it), it.position()
    ('b', '\\n', Position(line=2, column=1))

    Only ``"\\n"`` starts a new line; ``"\\r"`` advances the column like any
    other character.
    """

    __slots__ = ("_iter", "_position", "_exact")

    def __init__(self, chars: Iterable[str]) -> None:
        self._iter: Iterator[str] = iter(chars)
        # built-in iterators over these report exactly how many items remain
        self._exact = isinstance(chars, (str, list, tuple))
        self._position = Position.start()

    def position(self) -> Position:
        """Location of the character the next call to ``next`` returns.

        Once the underlying iterator is exhausted this is the location one past
        the last character.
        """
        return self._position.copy()

    @property
    def inner(self) -> Iterator[str]:
        """The wrapped iterator.

        Consuming from it directly skips position bookkeeping, so the tracked
        position no longer matches what has actually been read.
        """
        return self._iter

    def __iter__(self) -> Located:
        return self

    def __next__(self) -> str:
        ch = next(self._iter)
        if ch == "\n":
            self._position.next_line()
        else:
            self._position.next_column()
        return ch

    def count(self) -> int:
        """Consume the rest of the input and return how many items it held.

        Positions are not tracked for the skipped items.
        """
        return sum(1 for _ in self._iter)

    def size_hint(self) -> tuple[int, int | None]:
        """Bounds on the number of remaining items.

        The upper bound is only known for `str`, `list` and `tuple` input.
        """
        lower = operator.length_hint(self._iter)
        return lower, (lower if self._exact else None)

    def __length_hint__(self) -> int:
        return operator.length_hint(self._iter)

    def __repr__(self) -> str:
        return f"Located(at {self._position.format()})"
