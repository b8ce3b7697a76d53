"""
Configuration for the GUI and the arena.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class GuiConfig:
    """Window and timing configuration."""

    # Window
    window_size: int = 600
    title: str = "Tic Tac Toe"

    # Timing
    frame_delay_ms: int = 100
    menu_delay_ms: int = 100
    end_delay_ms: int = 2000

    # Font (None: pygame default font)
    font_path: Optional[str] = None
    font_size: int = 24

    # Colors
    background: Tuple[int, int, int] = (255, 255, 255)
    foreground: Tuple[int, int, int] = (0, 0, 0)
    message_color: Tuple[int, int, int] = (255, 0, 0)

    # Stroke width of grid lines and glyphs
    line_width: int = 3

    @property
    def cell_size(self) -> int:
        return self.window_size // 3


@dataclass
class ArenaConfig:
    """Arena evaluation configuration."""

    games: int = 500
    seed: int = 0

    # Solver opponent samples uniformly among its optimal moves
    solver_plays_optimal_random: bool = True
