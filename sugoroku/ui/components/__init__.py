"""UI components for Sugoroku."""

from sugoroku.ui.components.dice_input import render_dice_input
from sugoroku.ui.components.player_list import render_player_list

__all__ = [
    "render_dice_input",
    "render_player_list",
]
