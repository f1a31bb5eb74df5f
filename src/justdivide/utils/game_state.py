from __future__ import annotations

from esper import World

from justdivide.components.game_state import GameMode, GameState
from justdivide.events.bus import EVENT_GAME_MODE_CHANGED, EVENT_GAME_OVER, EventBus
from justdivide.systems.store import get_progress


def current_mode(world: World) -> GameMode | None:
    for _, state in world.get_component(GameState):
        return state.mode
    return None


def is_playing(world: World) -> bool:
    return current_mode(world) == GameMode.PLAYING


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> bool:
    """Update the session mode and emit a change event when it differs.

    Returns True when the mode actually changed.
    """
    for _, state in world.get_component(GameState):
        previous_mode = state.mode
        if previous_mode == mode:
            return False
        state.mode = mode
        event_bus.emit(
            EVENT_GAME_MODE_CHANGED,
            previous_mode=previous_mode,
            new_mode=mode,
        )
        return True
    # No existing GameState component; create a new one.
    world.create_entity(GameState(mode=mode))
    event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=None, new_mode=mode)
    return True


def trigger_game_over(world: World, event_bus: EventBus) -> bool:
    """Enter GAME_OVER once; repeated calls leave state and listeners untouched."""
    if not set_game_mode(world, event_bus, GameMode.GAME_OVER):
        return False
    event_bus.emit(EVENT_GAME_OVER, score=get_progress(world).score)
    return True
