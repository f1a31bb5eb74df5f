"""Read-only view of the game state for the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from esper import World

from justdivide.components.difficulty import Difficulty
from justdivide.components.game_state import GameMode
from justdivide.systems import store
from justdivide.systems.rules import hint_targets


@dataclass(frozen=True, slots=True)
class GameView:
    grid: Tuple[Optional[int], ...]
    upcoming: Tuple[int, ...]
    keep: Optional[int]
    score: int
    level: int
    trash: int
    best: int
    difficulty: Difficulty
    game_over: bool
    paused: bool
    help_visible: bool
    hints: Tuple[int, ...]
    elapsed: float
    can_undo: bool


def build_view(world: World) -> GameView:
    grid = store.get_grid(world)
    queue = store.get_queue(world)
    progress = store.get_progress(world)
    state = store.get_game_state(world)
    hints: Tuple[int, ...] = ()
    # Hints follow the active tile and are hidden once the game is over.
    if state.hints_enabled and state.mode != GameMode.GAME_OVER:
        hints = tuple(hint_targets(grid.cells, queue.head))
    return GameView(
        grid=tuple(grid.cells),
        upcoming=tuple(queue.visible()),
        keep=store.get_keep(world).value,
        score=progress.score,
        level=progress.level,
        trash=progress.trash,
        best=store.get_best_score(world).value,
        difficulty=store.get_difficulty(world),
        game_over=state.mode == GameMode.GAME_OVER,
        paused=state.mode == GameMode.PAUSED,
        help_visible=state.help_visible,
        hints=hints,
        elapsed=store.get_clock(world).elapsed,
        can_undo=len(store.get_history(world)) > 0,
    )
