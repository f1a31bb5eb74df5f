from justdivide.components.intents import TileOrigin
from justdivide.systems import store
from justdivide.systems.view import build_view
from tests.helpers import new_game, set_cells, set_queue


def test_view_exposes_first_two_queue_values():
    bus, world, engine, flow = new_game(best_score=42)
    set_queue(world, [4, 5, 6])
    view = build_view(world)
    assert view.upcoming == (4, 5)
    assert view.best == 42
    assert view.keep is None
    assert not view.game_over and not view.paused
    assert not view.can_undo


def test_view_hints_follow_active_tile_when_enabled():
    bus, world, engine, flow = new_game()
    set_cells(world, {5: 20})
    set_queue(world, [4, 5, 6])
    assert build_view(world).hints == ()
    flow.toggle_hints()
    assert build_view(world).hints == (1, 4, 6, 9)


def test_view_reflects_actions():
    bus, world, engine, flow = new_game()
    set_queue(world, [4, 5, 6])
    engine.keep(4, TileOrigin.QUEUE)
    view = build_view(world)
    assert view.keep == 4
    assert view.upcoming[0] == 5
    assert view.can_undo
    flow.toggle_pause()
    assert build_view(world).paused


def test_view_hides_hints_after_game_over():
    bus, world, engine, flow = new_game()
    set_cells(world, {5: 20})
    set_queue(world, [4, 5, 6])
    flow.toggle_hints()
    flow.trigger_game_over()
    view = build_view(world)
    assert view.game_over
    assert view.hints == ()
    assert store.get_game_state(world).hints_enabled
