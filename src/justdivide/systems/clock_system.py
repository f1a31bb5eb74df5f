from esper import World

from justdivide.events.bus import EventBus, EVENT_TICK, EVENT_GAME_RESTARTED
from justdivide.systems.store import get_clock
from justdivide.utils.game_state import is_playing


class ClockSystem:
    """Accumulates elapsed play time for display; paused and finished games do not tick."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_GAME_RESTARTED, self.on_restart)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt')
        if not dt or dt < 0:
            return
        if not is_playing(self.world):
            return
        get_clock(self.world).elapsed += float(dt)

    def on_restart(self, sender, **kwargs):
        get_clock(self.world).elapsed = 0.0


def format_elapsed(seconds: float) -> str:
    total = int(seconds)
    return f"{total // 60:02d}:{total % 60:02d}"
