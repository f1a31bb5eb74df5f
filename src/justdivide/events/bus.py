from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that are not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"                      # payload: symbol=int, modifiers=int


# ============================================================================
# PLAYER INTENTS
# ============================================================================
EVENT_INTENT = "intent"                            # payload: intent=PlaceIntent|KeepIntent|TrashIntent
EVENT_UNDO_REQUEST = "undo_request"                # payload: None
EVENT_RESTART_REQUEST = "restart_request"          # payload: None
EVENT_PAUSE_TOGGLE = "pause_toggle"                # payload: None
EVENT_HELP_TOGGLE = "help_toggle"                  # payload: None
EVENT_HINT_TOGGLE = "hint_toggle"                  # payload: None
EVENT_DIFFICULTY_CHANGE_REQUEST = "difficulty_change_request"  # payload: difficulty=Difficulty


# ============================================================================
# BOARD & TILES
# ============================================================================
EVENT_TILE_PLACED = "tile_placed"                  # payload: index=int, value=int, origin=TileOrigin
EVENT_TILES_MERGED = "tiles_merged"                # payload: outcome=MergeOutcome
EVENT_TILE_KEPT = "tile_kept"                      # payload: value=int, origin=TileOrigin, swapped=int|None
EVENT_TILE_TRASHED = "tile_trashed"                # payload: value=int, origin=TileOrigin, remaining=int
EVENT_QUEUE_ADVANCED = "queue_advanced"            # payload: queue=list[int]
EVENT_ACTION_REJECTED = "action_rejected"          # payload: intent=object|None, reason=RejectReason


# ============================================================================
# SCORE & PROGRESSION
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, delta=int
EVENT_LEVEL_UP = "level_up"                        # payload: level=int, trash=int
EVENT_BEST_SCORE_CHANGED = "best_score_changed"    # payload: best=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_OVER = "game_over"                      # payload: score=int
EVENT_GAME_RESTARTED = "game_restarted"            # payload: queue=list[int]
EVENT_UNDO_APPLIED = "undo_applied"                # payload: remaining=int
EVENT_HINTS_TOGGLED = "hints_toggled"              # payload: enabled=bool
EVENT_HELP_TOGGLED = "help_toggled"                # payload: visible=bool
EVENT_DIFFICULTY_CHANGED = "difficulty_changed"    # payload: previous=Difficulty, difficulty=Difficulty
