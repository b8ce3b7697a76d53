"""
Game session: turn order, moves and outcome for one game.

The state is immutable; every move returns a new GameState. Front-ends
(GUI, terminal, arena) hold the current state and replace it.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from .board import Side, apply_move, cell_bit, is_full, is_win, opponent
from .search import evaluate_and_choose


class Outcome(Enum):
    ONGOING = "ongoing"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"


# Pre-game menu: (label, side played by the AI)
MENU_OPTIONS = (
    ("Play X (AI O)", Side.O),
    ("Play O (AI X)", Side.X),
    ("Two Player", Side.NONE),
)


@dataclass(frozen=True)
class GameState:
    """Immutable game state."""
    occupancy: Tuple[int, int] = (0, 0)  # Indexed by Side.X / Side.O
    current: Side = Side.X               # Side to move
    ai: Side = Side.NONE                 # Side played by the AI, NONE for two players
    outcome: Outcome = Outcome.ONGOING
    winner_was_ai: bool = False

    @property
    def over(self) -> bool:
        return self.outcome is not Outcome.ONGOING

    def mask(self, side: Side) -> int:
        return self.occupancy[side]


def new_game(ai: Side = Side.NONE) -> GameState:
    """Start an empty board with X to move."""
    return GameState(ai=ai)


def is_ai_turn(state: GameState) -> bool:
    return not state.over and state.current == state.ai


def is_legal_move(state: GameState, cell: int) -> bool:
    """Check the game is running and the cell is on the board and empty."""
    if state.over or not 0 <= cell < 9:
        return False
    x, o = state.occupancy
    return not (x | o) & cell_bit(cell)


def play_move(state: GameState, cell: int) -> GameState:
    """
    Mark a cell for the side to move and hand the turn over.

    Raises:
        ValueError: if the game is over or the cell is not empty
    """
    if not is_legal_move(state, cell):
        raise ValueError(f"illegal move: {cell}")

    side = state.current
    occupancy = list(state.occupancy)
    occupancy[side] = apply_move(occupancy[side], cell)

    # Win before full board: the winning move may fill the last cell
    if is_win(occupancy[side]):
        outcome = Outcome.X_WINS if side == Side.X else Outcome.O_WINS
    elif is_full(*occupancy):
        outcome = Outcome.DRAW
    else:
        outcome = Outcome.ONGOING

    return replace(
        state,
        occupancy=tuple(occupancy),
        current=opponent(side),
        outcome=outcome,
        winner_was_ai=outcome in (Outcome.X_WINS, Outcome.O_WINS) and side == state.ai,
    )


def choose_ai_cell(state: GameState) -> int:
    """Run the search for the AI side and return its cell."""
    if not is_ai_turn(state):
        raise ValueError("not the AI's turn")
    me = state.mask(state.ai)
    opp = state.mask(opponent(state.ai))
    return evaluate_and_choose(me, opp).move


def ai_move(state: GameState) -> GameState:
    """Let the AI pick and play its move."""
    return play_move(state, choose_ai_cell(state))


def outcome_message(state: GameState) -> Optional[str]:
    """Text shown when the game ends, None while it is running."""
    if state.outcome is Outcome.DRAW:
        return "Draw!"
    if state.winner_was_ai:
        return "AI Wins!"
    if state.outcome is Outcome.X_WINS:
        return "X Wins!"
    if state.outcome is Outcome.O_WINS:
        return "O Wins!"
    return None
