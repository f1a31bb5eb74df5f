"""Game state resource describing the session mode and view toggles."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """Session modes; only PLAYING accepts intents and undo."""
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Singleton component storing the active mode plus hint/help toggles."""
    mode: GameMode = GameMode.PLAYING
    hints_enabled: bool = False
    help_visible: bool = False
