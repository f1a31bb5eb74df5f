"""High-level coordinator for session transitions: pause, help, undo, restart."""
from __future__ import annotations

import logging

from esper import World

from justdivide.components.action_result import ActionResult, RejectReason
from justdivide.components.difficulty import Difficulty, DifficultySetting
from justdivide.components.game_state import GameMode
from justdivide.events.bus import (
    EVENT_ACTION_REJECTED,
    EVENT_DIFFICULTY_CHANGE_REQUEST,
    EVENT_DIFFICULTY_CHANGED,
    EVENT_GAME_RESTARTED,
    EVENT_HELP_TOGGLE,
    EVENT_HELP_TOGGLED,
    EVENT_HINT_TOGGLE,
    EVENT_HINTS_TOGGLED,
    EVENT_PAUSE_TOGGLE,
    EVENT_RESTART_REQUEST,
    EVENT_UNDO_APPLIED,
    EVENT_UNDO_REQUEST,
    EventBus,
)
from justdivide.systems import store
from justdivide.utils.game_state import set_game_mode, trigger_game_over

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Owns the PLAYING / PAUSED / GAME_OVER state machine.

    PLAYING <-> PAUSED toggles without touching game state, GAME_OVER is
    terminal until a restart, and restart returns any mode to PLAYING.
    Undo is honoured only while PLAYING.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus

        self.event_bus.subscribe(EVENT_PAUSE_TOGGLE, self._on_pause_toggle)
        self.event_bus.subscribe(EVENT_HELP_TOGGLE, self._on_help_toggle)
        self.event_bus.subscribe(EVENT_HINT_TOGGLE, self._on_hint_toggle)
        self.event_bus.subscribe(EVENT_RESTART_REQUEST, self._on_restart)
        self.event_bus.subscribe(EVENT_UNDO_REQUEST, self._on_undo)
        self.event_bus.subscribe(EVENT_DIFFICULTY_CHANGE_REQUEST, self._on_difficulty_change)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_pause_toggle(self, sender, **payload) -> None:
        self.toggle_pause()

    def _on_help_toggle(self, sender, **payload) -> None:
        self.toggle_help()

    def _on_hint_toggle(self, sender, **payload) -> None:
        self.toggle_hints()

    def _on_restart(self, sender, **payload) -> None:
        self.restart()

    def _on_undo(self, sender, **payload) -> None:
        self.undo()

    def _on_difficulty_change(self, sender, **payload) -> None:
        difficulty = payload.get("difficulty")
        if isinstance(difficulty, str):
            try:
                difficulty = Difficulty(difficulty.upper())
            except ValueError:
                logger.warning("unknown difficulty %r ignored", payload.get("difficulty"))
                return
        if not isinstance(difficulty, Difficulty):
            return
        self.set_difficulty(difficulty)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def toggle_pause(self) -> GameMode:
        state = store.get_game_state(self.world)
        if state.mode == GameMode.GAME_OVER:
            return state.mode
        if state.mode == GameMode.PLAYING:
            set_game_mode(self.world, self.event_bus, GameMode.PAUSED)
        else:
            closing_help = state.help_visible
            state.help_visible = False
            set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
            if closing_help:
                self.event_bus.emit(EVENT_HELP_TOGGLED, visible=False)
        return state.mode

    def toggle_help(self) -> bool:
        """Showing the help panel pauses play; dismissing it resumes."""
        state = store.get_game_state(self.world)
        if state.help_visible:
            state.help_visible = False
            set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        elif state.mode == GameMode.PLAYING:
            state.help_visible = True
            set_game_mode(self.world, self.event_bus, GameMode.PAUSED)
        else:
            return state.help_visible
        self.event_bus.emit(EVENT_HELP_TOGGLED, visible=state.help_visible)
        return state.help_visible

    def toggle_hints(self) -> bool:
        state = store.get_game_state(self.world)
        state.hints_enabled = not state.hints_enabled
        self.event_bus.emit(EVENT_HINTS_TOGGLED, enabled=state.hints_enabled)
        return state.hints_enabled

    def set_difficulty(self, difficulty: Difficulty) -> None:
        """Only tiles generated from now on use the new pool."""
        for _, setting in self.world.get_component(DifficultySetting):
            previous = setting.difficulty
            setting.difficulty = difficulty
            self.event_bus.emit(EVENT_DIFFICULTY_CHANGED, previous=previous, difficulty=difficulty)
            return
        raise RuntimeError("DifficultySetting component not found")

    def restart(self) -> None:
        store.reset(self.world)
        logger.info("new game (difficulty %s)", store.get_difficulty(self.world).name)
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        self.event_bus.emit(EVENT_GAME_RESTARTED, queue=list(store.get_queue(self.world).values))

    def undo(self) -> ActionResult:
        state = store.get_game_state(self.world)
        if state.mode != GameMode.PLAYING:
            return ActionResult.rejected(RejectReason.NOT_PLAYING)
        snapshot = store.pop_history(self.world)
        if snapshot is None:
            self.event_bus.emit(EVENT_ACTION_REJECTED, intent=None, reason=RejectReason.HISTORY_EMPTY)
            return ActionResult.rejected(RejectReason.HISTORY_EMPTY)
        store.restore(self.world, snapshot)
        self.event_bus.emit(EVENT_UNDO_APPLIED, remaining=len(store.get_history(self.world)))
        return ActionResult.ok()

    def trigger_game_over(self) -> bool:
        return trigger_game_over(self.world, self.event_bus)
