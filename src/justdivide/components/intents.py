"""Player intents produced by the presentation layer and consumed by RulesEngine."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class TileOrigin(Enum):
    """Where a dragged tile came from."""
    QUEUE = auto()
    KEEP = auto()


@dataclass(frozen=True, slots=True)
class PlaceIntent:
    value: int
    origin: TileOrigin
    index: int


@dataclass(frozen=True, slots=True)
class KeepIntent:
    value: int
    origin: TileOrigin


@dataclass(frozen=True, slots=True)
class TrashIntent:
    value: int
    origin: TileOrigin


Intent = Union[PlaceIntent, KeepIntent, TrashIntent]
