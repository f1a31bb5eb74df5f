"""Entry point for the Just Divide puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from justdivide.world import create_world
from justdivide.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from justdivide.events.bus import EventBus, EVENT_KEY_PRESS, EVENT_TICK
from justdivide.systems.best_score_system import BestScoreSystem
from justdivide.systems.clock_system import ClockSystem
from justdivide.systems.game_flow_system import GameFlowSystem
from justdivide.systems.input import KeyboardInputSystem
from justdivide.systems.render import RenderSystem
from justdivide.systems.rules_engine import RulesEngine


class JustDivideWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)

        # Persistence first so the loaded best score is visible immediately
        self.best_score_system = BestScoreSystem(self.world, self.event_bus)

        # Rule and flow systems
        self.rules_engine = RulesEngine(self.world, self.event_bus)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self.clock_system = ClockSystem(self.world, self.event_bus)

        # Interface systems
        self.input_system = KeyboardInputSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self)
        set_background_color(color.DARK_SLATE_GRAY)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    JustDivideWindow()
    run()

if __name__ == "__main__":
    main()
