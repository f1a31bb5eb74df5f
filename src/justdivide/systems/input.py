from __future__ import annotations

from esper import World

from justdivide.components.difficulty import Difficulty
from justdivide.components.intents import KeepIntent, PlaceIntent, TileOrigin, TrashIntent
from justdivide.constants import (
    KEY_1,
    KEY_2,
    KEY_3,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_G,
    KEY_H,
    KEY_K,
    KEY_R,
    KEY_SPACE,
    KEY_T,
    KEY_Z,
)
from justdivide.events.bus import (
    EventBus,
    EVENT_DIFFICULTY_CHANGE_REQUEST,
    EVENT_HELP_TOGGLE,
    EVENT_HINT_TOGGLE,
    EVENT_INTENT,
    EVENT_KEY_PRESS,
    EVENT_PAUSE_TOGGLE,
    EVENT_RESTART_REQUEST,
    EVENT_UNDO_REQUEST,
)
from justdivide.systems import store
from justdivide.systems.rules import hint_targets

# arcade.key.MOD_SHIFT
MOD_SHIFT = 1

_SIMPLE_ACTIONS = {
    KEY_Z: EVENT_UNDO_REQUEST,
    KEY_R: EVENT_RESTART_REQUEST,
    KEY_ESCAPE: EVENT_PAUSE_TOGGLE,
    KEY_G: EVENT_HINT_TOGGLE,
    KEY_H: EVENT_HELP_TOGGLE,
}

_DIFFICULTY_KEYS = {
    KEY_1: Difficulty.EASY,
    KEY_2: Difficulty.MEDIUM,
    KEY_3: Difficulty.HARD,
}


class KeyboardInputSystem:
    """Translates key presses into request events and intents.

    Z undo, R restart, ESC pause, G hints, H help, 1/2/3 difficulty.
    SPACE/ENTER drops the active tile on the first hint cell (or the first
    empty cell), K keeps it and T trashes it. Holding SHIFT uses the kept
    tile instead of the queue head.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        self.handle_key_press(symbol, kwargs.get('modifiers', 0) or 0)

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> None:
        event_name = _SIMPLE_ACTIONS.get(symbol)
        if event_name is not None:
            self.event_bus.emit(event_name)
            return
        difficulty = _DIFFICULTY_KEYS.get(symbol)
        if difficulty is not None:
            self.event_bus.emit(EVENT_DIFFICULTY_CHANGE_REQUEST, difficulty=difficulty)
            return
        use_keep = bool(modifiers & MOD_SHIFT)
        tile = self._active_tile(use_keep)
        if tile is None:
            return
        value, origin = tile
        if symbol in (KEY_SPACE, KEY_ENTER):
            target = self._default_target(value)
            if target is None:
                return
            self.event_bus.emit(EVENT_INTENT, intent=PlaceIntent(value=value, origin=origin, index=target))
        elif symbol == KEY_K:
            self.event_bus.emit(EVENT_INTENT, intent=KeepIntent(value=value, origin=origin))
        elif symbol == KEY_T:
            self.event_bus.emit(EVENT_INTENT, intent=TrashIntent(value=value, origin=origin))

    def _active_tile(self, use_keep: bool) -> tuple[int, TileOrigin] | None:
        if use_keep:
            kept = store.get_keep(self.world).value
            return (kept, TileOrigin.KEEP) if kept is not None else None
        head = store.get_queue(self.world).head
        return (head, TileOrigin.QUEUE) if head is not None else None

    def _default_target(self, value: int) -> int | None:
        grid = store.get_grid(self.world)
        hints = hint_targets(grid.cells, value)
        if hints:
            return hints[0]
        empty = grid.empty_indices()
        return empty[0] if empty else None
