import random

from esper import World
from .events.bus import EventBus
from justdivide.components.best_score import BestScore
from justdivide.components.difficulty import Difficulty, DifficultySetting
from justdivide.components.game_state import GameMode, GameState
from justdivide.components.grid import Grid
from justdivide.components.keep_slot import KeepSlot
from justdivide.components.progress import Progress
from justdivide.components.session_clock import SessionClock
from justdivide.components.tile_queue import TileQueue
from justdivide.components.undo_history import UndoHistory
from justdivide.systems.tile_generation import fill_queue


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    difficulty: Difficulty = Difficulty.MEDIUM,
    best_score: int = 0,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Every piece of game state lives on one entity; store.py looks the
    # components up by type.
    world.create_entity(
        GameState(mode=initial_mode),
        DifficultySetting(difficulty=difficulty),
        Grid(),
        TileQueue(values=fill_queue(difficulty, world.random)),
        KeepSlot(),
        Progress(),
        BestScore(value=max(0, int(best_score))),
        UndoHistory(),
        SessionClock(),
    )
    return world
