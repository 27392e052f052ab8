from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from pathlib import Path

from .located import Located
from .position import Position
from .tagged import Tagged


logger = logging.getLogger(__name__)


def iter_chars(stream: io.TextIOBase, *, bufsize: int = 4096) -> Iterator[str]:
    """Return an iterator over the characters of a text stream.

    The stream is read in chunks of ``bufsize`` characters, so large files are
    never held in memory whole.
    """
    if not stream.readable():
        name = getattr(stream, "name", "<stream>")
        raise ValueError(f"stream must be readable: {name}")
    return _read_chunks(stream, bufsize)


def _read_chunks(stream: io.TextIOBase, bufsize: int) -> Iterator[str]:
    while True:
        chunk = stream.read(bufsize)
        if not chunk:
            return
        yield from chunk


def tag_source(src: str) -> list[tuple[str, Position]]:
    return list(Tagged(src))


def tag_file(path: str | Path) -> list[tuple[str, Position]]:
    p = Path(path).expanduser().resolve()
    logger.debug("tagging %s", p)
    with p.open(encoding="utf-8", newline="") as fh:
        return list(Tagged(iter_chars(fh)))


def position_at(src: str, index: int) -> Position:
    """Position of ``src[index]``, or the end position for ``index == len(src)``."""
    if not 0 <= index <= len(src):
        raise IndexError(f"index {index} out of range for source of length {len(src)}")
    loc = Located(src)
    for _ in range(index):
        next(loc)
    return loc.position()
