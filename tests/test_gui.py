import pygame
import pytest

from tictac.board import Side
from tictac.config import GuiConfig
from tictac import gui
from tictac.game import MENU_OPTIONS, GameState, Outcome, new_game
from tictac.gui import cell_from_pos, menu_rects, option_at, render_board

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


@pytest.mark.parametrize(
    "pos, cell",
    [
        ((0, 0), 0),
        ((250, 50), 1),
        ((599, 0), 2),
        ((10, 399), 3),
        ((300, 300), 4),
        ((599, 599), 8),
        ((600, 10), None),
        ((10, 600), None),
        ((-1, 5), None),
    ],
)
def test_cell_from_pos(pos, cell):
    assert cell_from_pos(pos, 200) == cell


def test_menu_layout():
    rects = menu_rects(GuiConfig())
    assert len(rects) == len(MENU_OPTIONS)
    assert rects[0] == pygame.Rect(150, 100, 300, 50)
    assert [r.y for r in rects] == [100, 200, 300]
    assert option_at((300, 125), rects) == 0
    assert option_at((300, 225), rects) == 1
    assert option_at((160, 340), rects) == 2
    assert option_at((10, 10), rects) is None


def test_render_board():
    config = GuiConfig()
    surface = pygame.Surface((config.window_size, config.window_size))
    state = GameState(occupancy=(0b000000001, 0b000010000), current=Side.X)

    render_board(surface, state, config)

    # Grid line between columns 0 and 1
    assert surface.get_at((200, 50))[:3] == BLACK
    # X in cell 0 crosses its center
    assert surface.get_at((100, 100))[:3] == BLACK
    # O in cell 4 is a ring, empty in the middle
    assert surface.get_at((300, 300))[:3] == WHITE
    assert any(surface.get_at((x, 300))[:3] == BLACK for x in range(230, 240))
    # Empty cell 8
    assert surface.get_at((500, 500))[:3] == WHITE


def test_render_message():
    pygame.font.init()
    try:
        config = GuiConfig()
        font = pygame.font.Font(None, config.font_size)
        surface = pygame.Surface((config.window_size, config.window_size))

        render_board(surface, GameState(), config, font, "Draw!")

        rect = pygame.Rect(150, 270, 300, 60)
        colored = [
            surface.get_at((x, y))[:3]
            for x in range(rect.left, rect.right, 3)
            for y in range(rect.top, rect.bottom, 3)
        ]
        assert any(c != WHITE for c in colored)
    finally:
        pygame.font.quit()


def click(cell, button=1, cell_size=200):
    pos = ((cell % 3) * cell_size + cell_size // 2, (cell // 3) * cell_size + cell_size // 2)
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def inject_events(monkeypatch):
    """Feed batches of events to pygame.event.get, then QUIT forever."""
    def install(*batches):
        pending = list(batches)

        def get(*args, **kwargs):
            if pending:
                return pending.pop(0)
            return [pygame.event.Event(pygame.QUIT)]

        monkeypatch.setattr(pygame.event, "get", get)
    return install


def fast_config():
    return GuiConfig(frame_delay_ms=0, menu_delay_ms=0, end_delay_ms=0)


def test_run_ignores_wheel_and_other_buttons(headless, inject_events, monkeypatch):
    def no_menu(*args):
        raise AssertionError("menu shown although the AI side was given")

    monkeypatch.setattr(gui, "select_ai", no_menu)
    inject_events(
        [click(8, button=4), click(6, button=5), click(7, button=3), click(5, button=2)],
        [click(0), click(3), click(1), click(4), click(2)],
    )

    state = gui.run(fast_config(), ai=Side.NONE)

    assert state.outcome is Outcome.X_WINS
    assert state.occupancy == (0b000000111, 0b000011000)


def test_run_with_menu_and_ai(headless, inject_events, monkeypatch):
    started = []

    def record_new_game(ai):
        started.append(ai)
        return new_game(ai)

    monkeypatch.setattr(gui, "new_game", record_new_game)

    # Menu: scroll over "Two Player" first, then pick "Play O (AI X)"
    rects = gui.menu_rects(GuiConfig())
    inject_events(
        [pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=4, pos=rects[2].center)],
        [pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=rects[1].center)],
    )

    # The window is closed on the first game frame
    assert gui.run(fast_config()) is None
    assert started == [Side.X]


def test_run_returns_none_when_menu_closed(headless, inject_events):
    inject_events([pygame.event.Event(pygame.QUIT)])
    assert gui.run(fast_config()) is None


def test_select_ai_needs_left_click(headless, inject_events):
    config = fast_config()
    rects = gui.menu_rects(config)
    inject_events(
        [
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=5, pos=rects[2].center),
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=rects[1].center),
        ],
        [pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=rects[0].center)],
    )

    pygame.init()
    try:
        screen = pygame.display.set_mode((config.window_size, config.window_size))
        font = pygame.font.Font(None, config.font_size)
        assert gui.select_ai(screen, font, config) == Side.O
    finally:
        pygame.quit()
