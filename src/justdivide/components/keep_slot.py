from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class KeepSlot:
    value: Optional[int] = None

    @property
    def occupied(self) -> bool:
        return self.value is not None
