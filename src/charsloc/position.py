from __future__ import annotations

from dataclasses import dataclass


@dataclass(order=True, slots=True)
class Position:
    """A location within a text.

    Both line and column are 1-based for user-facing messages. Ordering
    compares the line first, then the column.

    The fields are not validated: `start()` and the two advance methods keep
    both at 1 or more, but a hand-built `Position(0, 0)` is accepted as is.
    """

    line: int = 1
    column: int = 1

    @classmethod
    def start(cls) -> Position:
        return cls(line=1, column=1)

    def next_line(self) -> None:
        self.column = 1
        self.line += 1

    def next_column(self) -> None:
        self.column += 1

    def copy(self) -> Position:
        return Position(line=self.line, column=self.column)

    def format(self, file: str = "") -> str:
        if file == "":
            return f"{self.line}:{self.column}"

        return f"{file}:{self.line}:{self.column}"

    def __str__(self) -> str:
        return self.format()
