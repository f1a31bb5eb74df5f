"""Pure merge, hint and progression rules over a flat list of cells."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from justdivide.components.action_result import MergeOutcome
from justdivide.constants import CELL_COUNT, GRID_COLS, GRID_ROWS, LEVEL_SCORE_STEP, TRASH_PER_LEVEL

Cells = List[Optional[int]]


def neighbors(index: int) -> List[int]:
    """Orthogonal neighbours of index in scan order up, down, left, right."""
    if not 0 <= index < CELL_COUNT:
        raise IndexError(f"cell index {index} outside [0, {CELL_COUNT})")
    row, col = divmod(index, GRID_COLS)
    result: List[int] = []
    if row > 0:
        result.append(index - GRID_COLS)
    if row < GRID_ROWS - 1:
        result.append(index + GRID_COLS)
    if col > 0:
        result.append(index - 1)
    if col < GRID_COLS - 1:
        result.append(index + 1)
    return result


def tiles_match(a: int, b: int) -> bool:
    return a == b or a % b == 0 or b % a == 0


def resolve_merge(cells: Cells, index: int) -> MergeOutcome | None:
    """Merge the tile at index with its first matching neighbour.

    Equal values both vanish and score twice the value. When one value
    divides the other both cells are cleared and the quotient is written
    where the larger value was (nothing if the quotient is 1); the larger
    value is scored. Only one merge happens per call and nothing cascades.
    Mutates ``cells`` in place.
    """
    current = cells[index]
    if current is None:
        return None
    for other in neighbors(index):
        neighbor = cells[other]
        if neighbor is None:
            continue
        if current == neighbor:
            cells[index] = None
            cells[other] = None
            return MergeOutcome(
                placed_index=index,
                neighbor_index=other,
                cleared=(index, other),
                score_delta=current * 2,
            )
        if current % neighbor == 0 or neighbor % current == 0:
            larger_index, larger = (index, current) if current > neighbor else (other, neighbor)
            smaller = min(current, neighbor)
            ratio = larger // smaller
            cells[index] = None
            cells[other] = None
            if ratio == 1:
                # Unreachable while equality is checked first.
                return MergeOutcome(
                    placed_index=index,
                    neighbor_index=other,
                    cleared=(index, other),
                    score_delta=larger,
                )
            cells[larger_index] = ratio
            smaller_index = other if larger_index == index else index
            return MergeOutcome(
                placed_index=index,
                neighbor_index=other,
                cleared=(smaller_index,),
                result_index=larger_index,
                result_value=ratio,
                score_delta=larger,
            )
    return None


def is_hint_target(cells: Sequence[Optional[int]], index: int, value: int) -> bool:
    if cells[index] is not None:
        return False
    for other in neighbors(index):
        neighbor = cells[other]
        if neighbor is not None and tiles_match(value, neighbor):
            return True
    return False


def hint_targets(cells: Sequence[Optional[int]], value: int | None) -> List[int]:
    if not value:
        return []
    return [i for i in range(CELL_COUNT) if is_hint_target(cells, i, value)]


def is_board_full(cells: Sequence[Optional[int]]) -> bool:
    return all(value is not None for value in cells)


def apply_level_ups(score: int, level: int, trash: int) -> Tuple[int, int, int]:
    """Return (level, trash, levels_gained) after crossing every passed threshold."""
    gained = 0
    while score > level * LEVEL_SCORE_STEP:
        level += 1
        trash += TRASH_PER_LEVEL
        gained += 1
    return level, trash, gained
