from __future__ import annotations

import random
from typing import Dict, List, Tuple

from justdivide.components.difficulty import Difficulty
from justdivide.constants import QUEUE_LENGTH

_EASY: Tuple[int, ...] = (2, 3, 4, 5, 6, 8, 10)
_MEDIUM: Tuple[int, ...] = (2, 3, 4, 5, 6, 8, 9, 10, 12, 15, 20, 24, 30, 32, 35, 40)
_HARD: Tuple[int, ...] = _MEDIUM + (45, 48, 50, 60, 64, 72, 80, 100)

DIFFICULTY_POOLS: Dict[Difficulty, Tuple[int, ...]] = {
    Difficulty.EASY: _EASY,
    Difficulty.MEDIUM: _MEDIUM,
    Difficulty.HARD: _HARD,
}


def gen_number(difficulty: Difficulty, rng: random.Random | None = None) -> int:
    """Uniform draw from the difficulty's value pool."""
    pool = DIFFICULTY_POOLS[difficulty]
    return (rng or random).choice(pool)


def fill_queue(
    difficulty: Difficulty,
    rng: random.Random | None = None,
    length: int = QUEUE_LENGTH,
) -> List[int]:
    return [gen_number(difficulty, rng) for _ in range(length)]
