from dataclasses import dataclass, field
from typing import List, Optional

from justdivide.constants import CELL_COUNT


@dataclass(slots=True)
class Grid:
    """Row-major 4x4 board; each cell is empty (None) or a positive tile value."""

    cells: List[Optional[int]] = field(default_factory=lambda: [None] * CELL_COUNT)

    def _check(self, index: int) -> None:
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"cell index {index} outside [0, {CELL_COUNT})")

    def get_cell(self, index: int) -> Optional[int]:
        self._check(index)
        return self.cells[index]

    def set_cell(self, index: int, value: Optional[int]) -> None:
        self._check(index)
        self.cells[index] = value

    def clear(self) -> None:
        self.cells[:] = [None] * CELL_COUNT

    def empty_indices(self) -> List[int]:
        return [i for i, value in enumerate(self.cells) if value is None]
