"""Minimal board renderer: cells, queue, keep slot and counters as text."""
import arcade
from esper import World

from justdivide.constants import (
    BOARD_LEFT,
    BOARD_TOP,
    CELL_PITCH,
    CELL_TEXT_SIZE,
    GRID_COLS,
    PANEL_LEFT,
)
from justdivide.systems.clock_system import format_elapsed
from justdivide.systems.view import GameView, build_view

HELP_LINES = (
    "Drop tiles onto the grid.",
    "Equal numbers vanish (score x2).",
    "Divisible numbers divide (20 / 4 = 5).",
    "K keep, T trash, SPACE drop, SHIFT uses kept tile.",
    "G hints, Z undo, R restart, ESC pause, 1/2/3 difficulty.",
)


class RenderSystem:
    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def process(self) -> None:
        view = build_view(self.world)
        self._draw_board(view)
        self._draw_panel(view)
        if view.help_visible:
            self._draw_overlay("HOW TO PLAY", HELP_LINES)
        elif view.paused:
            self._draw_overlay("PAUSED", ("ESC to resume",))
        elif view.game_over:
            self._draw_overlay("GAME OVER", (f"Final score: {view.score}", "R to restart"))

    def _draw_board(self, view: GameView) -> None:
        half = CELL_PITCH / 2 - 4
        for index, value in enumerate(view.grid):
            row, col = divmod(index, GRID_COLS)
            cx = BOARD_LEFT + col * CELL_PITCH + CELL_PITCH / 2
            cy = BOARD_TOP - row * CELL_PITCH - CELL_PITCH / 2
            outline = arcade.color.YELLOW if index in view.hints else arcade.color.GRAY
            arcade.draw_lrbt_rectangle_outline(cx - half, cx + half, cy - half, cy + half, outline, 3)
            if value is not None:
                arcade.draw_text(
                    str(value),
                    cx,
                    cy,
                    arcade.color.WHITE,
                    CELL_TEXT_SIZE,
                    anchor_x="center",
                    anchor_y="center",
                )

    def _draw_panel(self, view: GameView) -> None:
        keep = "-" if view.keep is None else str(view.keep)
        upcoming = "  ".join(str(v) for v in view.upcoming)
        lines = (
            f"LEVEL {view.level}",
            f"SCORE {view.score}",
            f"BEST {view.best}",
            f"TIME {format_elapsed(view.elapsed)}",
            f"NEXT {upcoming}",
            f"KEEP {keep}",
            f"TRASH x{view.trash}",
            f"{view.difficulty.name}",
        )
        y = BOARD_TOP
        for line in lines:
            arcade.draw_text(line, PANEL_LEFT, y, arcade.color.WHITE, 18)
            y -= 36

    def _draw_overlay(self, title: str, lines) -> None:
        width = self.window.width
        height = self.window.height
        arcade.draw_lrbt_rectangle_filled(0, width, 0, height, (0, 0, 0, 180))
        arcade.draw_text(title, width / 2, height / 2 + 80, arcade.color.WHITE, 40, anchor_x="center")
        y = height / 2 + 20
        for line in lines:
            arcade.draw_text(line, width / 2, y, arcade.color.LIGHT_GRAY, 16, anchor_x="center")
            y -= 28
