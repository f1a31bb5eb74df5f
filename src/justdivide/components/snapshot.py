from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class StateSnapshot:
    """Immutable structural copy of everything undo restores."""

    grid: Tuple[Optional[int], ...]
    queue: Tuple[int, ...]
    keep: Optional[int]
    score: int
    level: int
    trash: int
