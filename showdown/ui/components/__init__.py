"""UI components for Place Value Showdown."""

from showdown.ui.components.board import render_board, render_expanded_values, render_pool
from showdown.ui.components.scoreboard import render_scoreboard

__all__ = [
    "render_board",
    "render_expanded_values",
    "render_pool",
    "render_scoreboard",
]
