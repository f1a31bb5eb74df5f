from dataclasses import dataclass

from justdivide.constants import STARTING_TRASH


@dataclass(slots=True)
class Progress:
    """Per-game counters: score, level and the remaining trash budget."""

    score: int = 0
    level: int = 1
    trash: int = STARTING_TRASH
