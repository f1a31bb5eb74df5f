from dataclasses import dataclass
from enum import Enum


class Difficulty(Enum):
    """Selects the pool new tile values are drawn from."""
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


@dataclass(slots=True)
class DifficultySetting:
    difficulty: Difficulty = Difficulty.MEDIUM
