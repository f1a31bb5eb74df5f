from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from esper import World

from justdivide.constants import BEST_SCORE_KEY, DATA_DIR_ENV
from justdivide.events.bus import EVENT_BEST_SCORE_CHANGED, EventBus
from justdivide.systems.store import get_best_score

logger = logging.getLogger(__name__)


class BestScoreSystem:
    """Persists the best score across sessions.

    The save file is a JSON object holding one integer under BEST_SCORE_KEY.
    Nothing else about a game is written to disk.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        save_path: Path | None = None,
        load_existing: bool = True,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._save_path = Path(save_path) if save_path is not None else self._default_save_path()

        self.event_bus.subscribe(EVENT_BEST_SCORE_CHANGED, self._on_best_score_changed)

        # Without load_existing the file is left alone until the in-memory
        # best is beaten, at which point it is overwritten.
        if load_existing:
            self.load()

    @staticmethod
    def _default_save_path() -> Path:
        data_dir = os.environ.get(DATA_DIR_ENV)
        base = Path(data_dir) if data_dir else Path.home() / ".just_divide"
        return base / "best_score.json"

    @property
    def save_path(self) -> Path:
        return self._save_path

    def load(self) -> int:
        best = get_best_score(self.world)
        try:
            with self._save_path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            best.value = 0
            self.save()
            return best.value
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("best score file %s is corrupt; starting from 0", self._save_path)
            best.value = 0
            self.save()
            return best.value
        try:
            best.value = max(0, int(payload.get(BEST_SCORE_KEY, 0)))
        except (AttributeError, TypeError, ValueError):
            logger.warning("best score file %s has no usable value; starting from 0", self._save_path)
            best.value = 0
        return best.value

    def save(self) -> None:
        self._save_path.parent.mkdir(parents=True, exist_ok=True)
        payload = {BEST_SCORE_KEY: get_best_score(self.world).value}
        with self._save_path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)

    def _on_best_score_changed(self, sender, **payload) -> None:
        self.save()
