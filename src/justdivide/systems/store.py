"""Read/write access to the canonical game state held in the world.

No rule validation happens here; RulesEngine and GameFlowSystem are the
only callers that mutate state.
"""
from __future__ import annotations

import random
from typing import Optional, Type, TypeVar

from esper import World

from justdivide.components.best_score import BestScore
from justdivide.components.difficulty import Difficulty, DifficultySetting
from justdivide.components.game_state import GameState
from justdivide.components.grid import Grid
from justdivide.components.keep_slot import KeepSlot
from justdivide.components.progress import Progress
from justdivide.components.session_clock import SessionClock
from justdivide.components.snapshot import StateSnapshot
from justdivide.components.tile_queue import TileQueue
from justdivide.components.undo_history import UndoHistory
from justdivide.constants import STARTING_TRASH
from justdivide.systems.tile_generation import fill_queue, gen_number

C = TypeVar("C")


def _singleton(world: World, component_type: Type[C]) -> C:
    for _, component in world.get_component(component_type):
        return component
    raise RuntimeError(f"{component_type.__name__} component not found")


def get_grid(world: World) -> Grid:
    return _singleton(world, Grid)


def get_queue(world: World) -> TileQueue:
    return _singleton(world, TileQueue)


def get_keep(world: World) -> KeepSlot:
    return _singleton(world, KeepSlot)


def get_progress(world: World) -> Progress:
    return _singleton(world, Progress)


def get_best_score(world: World) -> BestScore:
    return _singleton(world, BestScore)


def get_difficulty(world: World) -> Difficulty:
    return _singleton(world, DifficultySetting).difficulty


def get_history(world: World) -> UndoHistory:
    return _singleton(world, UndoHistory)


def get_game_state(world: World) -> GameState:
    return _singleton(world, GameState)


def get_clock(world: World) -> SessionClock:
    return _singleton(world, SessionClock)


def world_rng(world: World) -> random.Random | None:
    return getattr(world, "random", None)


def get_cell(world: World, index: int) -> Optional[int]:
    return get_grid(world).get_cell(index)


def set_cell(world: World, index: int, value: Optional[int]) -> None:
    get_grid(world).set_cell(index, value)


def next_tile(world: World) -> int:
    return gen_number(get_difficulty(world), world_rng(world))


def snapshot(world: World) -> StateSnapshot:
    progress = get_progress(world)
    return StateSnapshot(
        grid=tuple(get_grid(world).cells),
        queue=tuple(get_queue(world).values),
        keep=get_keep(world).value,
        score=progress.score,
        level=progress.level,
        trash=progress.trash,
    )


def restore(world: World, state: StateSnapshot) -> None:
    get_grid(world).cells[:] = list(state.grid)
    get_queue(world).values[:] = list(state.queue)
    get_keep(world).value = state.keep
    progress = get_progress(world)
    progress.score = state.score
    progress.level = state.level
    progress.trash = state.trash


def push_history(world: World, state: StateSnapshot | None = None) -> StateSnapshot:
    state = state if state is not None else snapshot(world)
    get_history(world).push(state)
    return state


def pop_history(world: World) -> StateSnapshot | None:
    return get_history(world).pop()


def reset(world: World) -> None:
    """Start a fresh game; best score and difficulty carry over.

    The session mode is left to the caller (GameFlowSystem.restart).
    """
    get_grid(world).clear()
    get_queue(world).values[:] = fill_queue(get_difficulty(world), world_rng(world))
    get_keep(world).value = None
    progress = get_progress(world)
    progress.score = 0
    progress.level = 1
    progress.trash = STARTING_TRASH
    get_history(world).clear()
    get_clock(world).elapsed = 0.0
    state = get_game_state(world)
    state.hints_enabled = False
    state.help_visible = False
