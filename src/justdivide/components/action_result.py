from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple


class RejectReason(Enum):
    CELL_OCCUPIED = auto()
    TRASH_EXHAUSTED = auto()
    HISTORY_EMPTY = auto()
    NOT_PLAYING = auto()
    TILE_MISMATCH = auto()


@dataclass(frozen=True, slots=True)
class MergeOutcome:
    """What a single merge did to the board.

    cleared: indices emptied by the merge.
    result_index/result_value: the cell left holding a quotient, if any.
    """

    placed_index: int
    neighbor_index: int
    cleared: Tuple[int, ...] = field(default_factory=tuple)
    result_index: Optional[int] = None
    result_value: Optional[int] = None
    score_delta: int = 0


@dataclass(frozen=True, slots=True)
class ActionResult:
    applied: bool
    reason: Optional[RejectReason] = None
    merge: Optional[MergeOutcome] = None

    @classmethod
    def ok(cls, merge: Optional[MergeOutcome] = None) -> "ActionResult":
        return cls(applied=True, merge=merge)

    @classmethod
    def rejected(cls, reason: RejectReason) -> "ActionResult":
        return cls(applied=False, reason=reason)
