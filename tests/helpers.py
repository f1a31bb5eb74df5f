from __future__ import annotations

import random
from typing import Iterable, Mapping, Optional

from esper import World

from justdivide.components.difficulty import Difficulty
from justdivide.events.bus import EventBus
from justdivide.systems import store
from justdivide.systems.game_flow_system import GameFlowSystem
from justdivide.systems.rules_engine import RulesEngine
from justdivide.world import create_world


def new_game(*, seed: int = 0, difficulty: Difficulty = Difficulty.MEDIUM, best_score: int = 0):
    """Build a world with the rule and flow systems attached."""

    bus = EventBus()
    world = create_world(bus, difficulty=difficulty, best_score=best_score, rng=random.Random(seed))
    engine = RulesEngine(world, bus)
    flow = GameFlowSystem(world, bus)
    return bus, world, engine, flow


def set_cells(world: World, cells: Mapping[int, Optional[int]]) -> None:
    """Write values straight into the grid, bypassing the rules."""

    for index, value in cells.items():
        store.set_cell(world, index, value)


def set_queue(world: World, values: Iterable[int]) -> None:
    store.get_queue(world).values[:] = list(values)
