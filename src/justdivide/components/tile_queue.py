from dataclasses import dataclass, field
from typing import List, Optional

from justdivide.constants import QUEUE_VISIBLE


@dataclass(slots=True)
class TileQueue:
    """Upcoming tile values; the head is the active, draggable tile."""

    values: List[int] = field(default_factory=list)

    @property
    def head(self) -> Optional[int]:
        return self.values[0] if self.values else None

    def visible(self) -> List[int]:
        return list(self.values[:QUEUE_VISIBLE])

    def advance(self, new_value: int) -> int:
        """Pop the head and push new_value at the tail; returns the popped head."""
        popped = self.values.pop(0)
        self.values.append(new_value)
        return popped
