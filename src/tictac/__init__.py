"""
tictac - TicTacToe with an optimal alpha-beta AI.

Board state is two 9-bit occupancy masks; the AI runs an exhaustive
negamax search with alpha-beta pruning and never loses.
"""

from .board import (
    FULL,
    WIN_PATTERNS,
    Side,
    opponent,
    is_win,
    is_full,
    legal_moves,
    apply_move,
    side_to_move,
    is_terminal,
)
from .search import WIN, DRAW, LOSS, SearchResult, alpha_beta, evaluate_and_choose
from .solver import solve, optimal_moves, iter_all_legal_nonterminal_states
from .game import (
    MENU_OPTIONS,
    GameState,
    Outcome,
    new_game,
    is_ai_turn,
    is_legal_move,
    play_move,
    ai_move,
    outcome_message,
)
from .config import GuiConfig, ArenaConfig
from .arena import eval_vs_random, eval_vs_solver, play_game

__version__ = "0.1.0"
__all__ = [
    "FULL",
    "WIN_PATTERNS",
    "Side",
    "opponent",
    "is_win",
    "is_full",
    "legal_moves",
    "apply_move",
    "side_to_move",
    "is_terminal",
    "WIN",
    "DRAW",
    "LOSS",
    "SearchResult",
    "alpha_beta",
    "evaluate_and_choose",
    "solve",
    "optimal_moves",
    "iter_all_legal_nonterminal_states",
    "MENU_OPTIONS",
    "GameState",
    "Outcome",
    "new_game",
    "is_ai_turn",
    "is_legal_move",
    "play_move",
    "ai_move",
    "outcome_message",
    "GuiConfig",
    "ArenaConfig",
    "eval_vs_random",
    "eval_vs_solver",
    "play_game",
]
