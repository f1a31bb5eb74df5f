from dataclasses import dataclass, field
from typing import List, Optional

from justdivide.components.snapshot import StateSnapshot
from justdivide.constants import HISTORY_CAPACITY


@dataclass(slots=True)
class UndoHistory:
    """Bounded LIFO of snapshots taken before each mutating action.

    Pushing past ``capacity`` drops the oldest entry.
    """

    entries: List[StateSnapshot] = field(default_factory=list)
    capacity: int = HISTORY_CAPACITY

    def push(self, snapshot: StateSnapshot) -> None:
        self.entries.append(snapshot)
        while len(self.entries) > self.capacity:
            self.entries.pop(0)

    def pop(self) -> Optional[StateSnapshot]:
        if not self.entries:
            return None
        return self.entries.pop()

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)
