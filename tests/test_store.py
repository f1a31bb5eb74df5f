import random

import pytest

from justdivide.components.difficulty import Difficulty
from justdivide.components.game_state import GameMode
from justdivide.constants import CELL_COUNT, HISTORY_CAPACITY, QUEUE_LENGTH, STARTING_TRASH
from justdivide.events.bus import EventBus
from justdivide.systems import store
from justdivide.systems.tile_generation import DIFFICULTY_POOLS
from justdivide.world import create_world
from tests.helpers import set_cells, set_queue


def _world(**kwargs):
    bus = EventBus()
    return create_world(bus, rng=random.Random(7), **kwargs)


def test_fresh_world_has_initial_state():
    world = _world()
    assert store.get_grid(world).cells == [None] * CELL_COUNT
    assert len(store.get_queue(world).values) == QUEUE_LENGTH
    assert store.get_keep(world).value is None
    progress = store.get_progress(world)
    assert (progress.score, progress.level, progress.trash) == (0, 1, STARTING_TRASH)
    assert len(store.get_history(world)) == 0
    assert store.get_game_state(world).mode == GameMode.PLAYING
    assert store.get_difficulty(world) == Difficulty.MEDIUM


def test_initial_queue_uses_requested_difficulty():
    world = _world(difficulty=Difficulty.EASY)
    assert set(store.get_queue(world).values) <= set(DIFFICULTY_POOLS[Difficulty.EASY])


def test_cell_access_out_of_range_raises():
    world = _world()
    with pytest.raises(IndexError):
        store.get_cell(world, 16)
    with pytest.raises(IndexError):
        store.set_cell(world, -1, 2)


def test_snapshot_is_a_structural_copy():
    world = _world()
    set_cells(world, {0: 4, 3: 9})
    set_queue(world, [2, 3, 4])
    snap = store.snapshot(world)
    store.set_cell(world, 0, None)
    store.get_queue(world).values[0] = 40
    assert snap.grid[0] == 4
    assert snap.queue == (2, 3, 4)


def test_restore_overwrites_every_field():
    world = _world()
    set_cells(world, {0: 4})
    set_queue(world, [2, 3, 4])
    store.get_keep(world).value = 8
    progress = store.get_progress(world)
    progress.score, progress.level, progress.trash = 70, 2, 11
    snap = store.snapshot(world)

    set_cells(world, {0: None, 1: 5})
    set_queue(world, [9, 9, 9])
    store.get_keep(world).value = None
    progress.score, progress.level, progress.trash = 0, 1, 0

    store.restore(world, snap)
    assert store.snapshot(world) == snap


def test_history_is_bounded_and_evicts_oldest():
    world = _world()
    for score in range(HISTORY_CAPACITY + 1):
        store.get_progress(world).score = score
        store.push_history(world)
    history = store.get_history(world)
    assert len(history) == HISTORY_CAPACITY
    assert history.entries[0].score == 1
    assert store.pop_history(world).score == HISTORY_CAPACITY


def test_pop_history_on_empty_returns_none():
    world = _world()
    assert store.pop_history(world) is None


def test_reset_preserves_best_score_and_difficulty():
    world = _world(difficulty=Difficulty.HARD, best_score=300)
    set_cells(world, {0: 4, 1: 5})
    store.get_keep(world).value = 10
    progress = store.get_progress(world)
    progress.score, progress.level, progress.trash = 120, 3, 2
    store.push_history(world)
    store.get_clock(world).elapsed = 12.5
    store.get_game_state(world).hints_enabled = True

    store.reset(world)

    assert store.get_grid(world).cells == [None] * CELL_COUNT
    assert store.get_keep(world).value is None
    assert (progress.score, progress.level, progress.trash) == (0, 1, STARTING_TRASH)
    assert len(store.get_history(world)) == 0
    assert store.get_clock(world).elapsed == 0.0
    assert store.get_game_state(world).hints_enabled is False
    assert store.get_best_score(world).value == 300
    assert store.get_difficulty(world) == Difficulty.HARD
    assert len(store.get_queue(world).values) == QUEUE_LENGTH
