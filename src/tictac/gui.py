"""
Pygame front-end: pre-game menu, board rendering and the main loop.
"""

from typing import List, Optional, Sequence, Tuple

import pygame

from .board import Side, cells
from .config import GuiConfig
from .game import (
    MENU_OPTIONS,
    GameState,
    ai_move,
    is_ai_turn,
    is_legal_move,
    new_game,
    outcome_message,
    play_move,
)

# Wheel scrolls and other buttons also arrive as MOUSEBUTTONDOWN
LEFT_BUTTON = 1


def cell_from_pos(pos: Tuple[int, int], cell_size: int) -> Optional[int]:
    """Convert a pixel position to a cell index, None outside the board."""
    x, y = pos
    col, row = x // cell_size, y // cell_size
    if not (0 <= col < 3 and 0 <= row < 3):
        return None
    return row * 3 + col


def menu_rects(config: GuiConfig) -> List[pygame.Rect]:
    """One button rect per menu option, stacked in the middle of the window."""
    w = config.window_size
    return [
        pygame.Rect(w // 4, w // 6 + i * (w // 6), w // 2, w // 12)
        for i in range(len(MENU_OPTIONS))
    ]


def option_at(pos: Tuple[int, int], rects: Sequence[pygame.Rect]) -> Optional[int]:
    for i, rect in enumerate(rects):
        if rect.collidepoint(pos):
            return i
    return None


def draw_x(surface: pygame.Surface, cell: int, config: GuiConfig):
    size = config.cell_size
    x = (cell % 3) * size
    y = (cell // 3) * size
    pad = size // 4
    color, width = config.foreground, config.line_width
    pygame.draw.line(surface, color, (x + pad, y + pad), (x + size - pad, y + size - pad), width)
    pygame.draw.line(surface, color, (x + size - pad, y + pad), (x + pad, y + size - pad), width)


def draw_o(surface: pygame.Surface, cell: int, config: GuiConfig):
    size = config.cell_size
    center = ((cell % 3) * size + size // 2, (cell // 3) * size + size // 2)
    pygame.draw.circle(surface, config.foreground, center, size // 3, config.line_width)


def draw_text(surface: pygame.Surface, font: pygame.font.Font, text: str,
              rect: pygame.Rect, color: Tuple[int, int, int]):
    """Render text stretched to fill rect."""
    text_surf = font.render(text, True, color)
    surface.blit(pygame.transform.smoothscale(text_surf, rect.size), rect.topleft)


def render_board(
    surface: pygame.Surface,
    state: GameState,
    config: GuiConfig,
    font: Optional[pygame.font.Font] = None,
    message: Optional[str] = None,
):
    """Draw grid, glyphs and (optionally) the end-of-game message."""
    w = config.window_size
    size = config.cell_size
    surface.fill(config.background)

    # Grid
    for i in range(1, 3):
        pygame.draw.line(surface, config.foreground, (i * size, 0), (i * size, w), config.line_width)
        pygame.draw.line(surface, config.foreground, (0, i * size), (w, i * size), config.line_width)

    # Glyphs
    for cell, owner in enumerate(cells(*state.occupancy)):
        if owner == Side.X:
            draw_x(surface, cell, config)
        elif owner == Side.O:
            draw_o(surface, cell, config)

    if message and font is not None:
        rect = pygame.Rect(w // 4, w // 2 - 30, w // 2, 60)
        draw_text(surface, font, message, rect, config.message_color)


def select_ai(screen: pygame.Surface, font: pygame.font.Font, config: GuiConfig) -> Optional[Side]:
    """
    Show the pre-game menu until an option is clicked.

    Returns:
        The side the AI plays (Side.NONE for two players), or None if
        the window was closed
    """
    rects = menu_rects(config)

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return None
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
                i = option_at(event.pos, rects)
                if i is not None:
                    return MENU_OPTIONS[i][1]

        screen.fill(config.background)
        for (label, _), rect in zip(MENU_OPTIONS, rects):
            draw_text(screen, font, label, rect, config.foreground)
        pygame.display.flip()
        pygame.time.delay(config.menu_delay_ms)


def run(config: Optional[GuiConfig] = None, ai: Optional[Side] = None) -> Optional[GameState]:
    """
    Open the window, run the menu and play one game.

    Args:
        ai: Side played by the AI (Side.NONE for two players); the
            pre-game menu is skipped when given

    Returns:
        Final game state, or None if the window was closed early
    """
    config = config or GuiConfig()
    pygame.init()
    try:
        screen = pygame.display.set_mode((config.window_size, config.window_size))
        pygame.display.set_caption(config.title)
        font = pygame.font.Font(config.font_path, config.font_size)

        if ai is None:
            ai = select_ai(screen, font, config)
            if ai is None:
                return None

        state = new_game(ai)
        while not state.over:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return None
                if (event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON
                        and not is_ai_turn(state)):
                    cell = cell_from_pos(event.pos, config.cell_size)
                    if cell is not None and is_legal_move(state, cell):
                        state = play_move(state, cell)

            if is_ai_turn(state):
                state = ai_move(state)

            render_board(screen, state, config, font, outcome_message(state))
            pygame.display.flip()
            pygame.time.delay(config.frame_delay_ms)

        pygame.time.delay(config.end_delay_ms)
        return state
    finally:
        pygame.quit()
