from __future__ import annotations

import logging

from esper import World

from justdivide.components.action_result import ActionResult, RejectReason
from justdivide.components.intents import Intent, KeepIntent, PlaceIntent, TileOrigin, TrashIntent
from justdivide.events.bus import (
    EventBus,
    EVENT_ACTION_REJECTED,
    EVENT_BEST_SCORE_CHANGED,
    EVENT_INTENT,
    EVENT_LEVEL_UP,
    EVENT_QUEUE_ADVANCED,
    EVENT_SCORE_CHANGED,
    EVENT_TILE_KEPT,
    EVENT_TILE_PLACED,
    EVENT_TILE_TRASHED,
    EVENT_TILES_MERGED,
)
from justdivide.systems import store
from justdivide.systems.rules import apply_level_ups, is_board_full, resolve_merge
from justdivide.utils.game_state import is_playing, trigger_game_over

logger = logging.getLogger(__name__)


class RulesEngine:
    """Validates and applies player intents against the game state.

    Flow per intent:
      - Reject with NOT_PLAYING unless the session is PLAYING.
      - Reject with TILE_MISMATCH unless the value is the tile currently
        held by its origin (queue head or keep slot).
      - Every other rejection is decided before anything is written, so a
        rejected action leaves the state and history exactly as they were.
      - Push a snapshot to the undo history, then mutate.
      - After every applied action the board is checked for game over.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_INTENT, self.on_intent)

    def on_intent(self, sender, **kwargs):
        intent = kwargs.get('intent')
        if intent is None:
            return
        self.submit(intent)

    def submit(self, intent: Intent) -> ActionResult:
        match intent:
            case PlaceIntent(value=value, origin=origin, index=index):
                return self.place(value, origin, index)
            case KeepIntent(value=value, origin=origin):
                return self.keep(value, origin)
            case TrashIntent(value=value, origin=origin):
                return self.trash(value, origin)
            case _:
                raise TypeError(f"unsupported intent: {intent!r}")

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def place(self, value: int, origin: TileOrigin, index: int) -> ActionResult:
        intent = PlaceIntent(value=value, origin=origin, index=index)
        if not is_playing(self.world):
            return self._reject(intent, RejectReason.NOT_PLAYING)
        # Out-of-range indices raise before anything is touched.
        occupant = store.get_cell(self.world, index)
        if not self._holds(origin, value):
            return self._reject(intent, RejectReason.TILE_MISMATCH)
        if occupant is not None:
            return self._reject(intent, RejectReason.CELL_OCCUPIED)

        store.push_history(self.world)
        grid = store.get_grid(self.world)
        grid.set_cell(index, value)
        self.event_bus.emit(EVENT_TILE_PLACED, index=index, value=value, origin=origin)
        outcome = resolve_merge(grid.cells, index)
        if outcome is not None:
            logger.debug("merge at %d: %r", index, outcome)
            self.event_bus.emit(EVENT_TILES_MERGED, outcome=outcome)
            self.apply_score_delta(outcome.score_delta)
        self._consume(origin)
        self._check_game_over()
        return ActionResult.ok(outcome)

    def keep(self, value: int, origin: TileOrigin) -> ActionResult:
        intent = KeepIntent(value=value, origin=origin)
        if not is_playing(self.world):
            return self._reject(intent, RejectReason.NOT_PLAYING)
        if not self._holds(origin, value):
            return self._reject(intent, RejectReason.TILE_MISMATCH)
        if origin is TileOrigin.KEEP:
            # Dropping the kept tile back onto its own slot changes nothing.
            return ActionResult.ok()

        store.push_history(self.world)
        slot = store.get_keep(self.world)
        swapped: int | None = None
        if not slot.occupied:
            slot.value = value
            self._advance_queue()
        else:
            swapped = slot.value
            slot.value = value
            queue = store.get_queue(self.world)
            queue.values[0] = swapped
            self.event_bus.emit(EVENT_QUEUE_ADVANCED, queue=list(queue.values))
        self.event_bus.emit(EVENT_TILE_KEPT, value=value, origin=origin, swapped=swapped)
        self._check_game_over()
        return ActionResult.ok()

    def trash(self, value: int, origin: TileOrigin) -> ActionResult:
        intent = TrashIntent(value=value, origin=origin)
        if not is_playing(self.world):
            return self._reject(intent, RejectReason.NOT_PLAYING)
        if not self._holds(origin, value):
            return self._reject(intent, RejectReason.TILE_MISMATCH)
        progress = store.get_progress(self.world)
        if progress.trash <= 0:
            return self._reject(intent, RejectReason.TRASH_EXHAUSTED)

        store.push_history(self.world)
        progress.trash -= 1
        self._consume(origin)
        self.event_bus.emit(EVENT_TILE_TRASHED, value=value, origin=origin, remaining=progress.trash)
        self.apply_score_delta(0)
        self._check_game_over()
        return ActionResult.ok()

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def apply_score_delta(self, delta: int) -> None:
        """Add delta to the score, then settle level-ups and the best score."""
        progress = store.get_progress(self.world)
        if delta:
            progress.score += delta
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=progress.score, delta=delta)
        level, trash, gained = apply_level_ups(progress.score, progress.level, progress.trash)
        if gained:
            progress.level = level
            progress.trash = trash
            logger.debug("level up to %d (+%d), trash now %d", level, gained, trash)
            self.event_bus.emit(EVENT_LEVEL_UP, level=level, trash=trash)
        best = store.get_best_score(self.world)
        if progress.score > best.value:
            best.value = progress.score
            self.event_bus.emit(EVENT_BEST_SCORE_CHANGED, best=best.value)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _consume(self, origin: TileOrigin) -> None:
        if origin is TileOrigin.QUEUE:
            self._advance_queue()
        else:
            store.get_keep(self.world).value = None

    def _advance_queue(self) -> None:
        queue = store.get_queue(self.world)
        queue.advance(store.next_tile(self.world))
        self.event_bus.emit(EVENT_QUEUE_ADVANCED, queue=list(queue.values))

    def _check_game_over(self) -> None:
        if is_board_full(store.get_grid(self.world).cells):
            trigger_game_over(self.world, self.event_bus)

    def _holds(self, origin: TileOrigin, value: int) -> bool:
        if origin is TileOrigin.QUEUE:
            held = store.get_queue(self.world).head
        else:
            held = store.get_keep(self.world).value
        return held is not None and held == value

    def _reject(self, intent: Intent, reason: RejectReason) -> ActionResult:
        logger.debug("rejected %r: %s", intent, reason.name)
        self.event_bus.emit(EVENT_ACTION_REJECTED, intent=intent, reason=reason)
        return ActionResult.rejected(reason)

