from __future__ import annotations

from .api import iter_chars, position_at, tag_file, tag_source
from .located import Located
from .position import Position
from .tagged import Tagged

__all__ = [
    "Located",
    "Position",
    "Tagged",
    "iter_chars",
    "position_at",
    "tag_file",
    "tag_source",
]
