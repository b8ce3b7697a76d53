"""
Evaluation functions.

Plays the alpha-beta AI against a random opponent and against the exact
solver, alternating sides, and reports win/draw/loss rates.
"""

from typing import Callable, Dict, Optional, Tuple

import numpy as np
from tqdm.auto import tqdm, trange

from .board import Side, legal_moves, opponent
from .game import Outcome, new_game, play_move
from .search import evaluate_and_choose
from .solver import solve

# agent(me, opp) -> cell
Agent = Callable[[int, int], int]


def search_agent(me: int, opp: int) -> int:
    """The alpha-beta AI as an agent."""
    return evaluate_and_choose(me, opp).move


def make_random_agent(rng: np.random.Generator) -> Agent:
    """Agent picking uniformly among the empty cells."""
    def agent(me: int, opp: int) -> int:
        return int(rng.choice(legal_moves(me, opp)))
    return agent


def make_solver_agent(rng: np.random.Generator, optimal_random: bool = True) -> Agent:
    """
    Agent playing the exact solver's moves.

    Args:
        optimal_random: If True, sample uniformly from all optimal moves,
            otherwise take the lowest-index one
    """
    def agent(me: int, opp: int) -> int:
        _, best_moves = solve(me, opp)
        if optimal_random:
            return int(rng.choice(best_moves))
        return best_moves[0]
    return agent


def play_game(x_agent: Agent, o_agent: Agent) -> Side:
    """
    Play one game to completion.

    Returns:
        The winning side, Side.NONE for a draw
    """
    agents = {Side.X: x_agent, Side.O: o_agent}
    state = new_game()

    while not state.over:
        side = state.current
        cell = agents[side](state.mask(side), state.mask(opponent(side)))
        state = play_move(state, cell)

    if state.outcome is Outcome.X_WINS:
        return Side.X
    if state.outcome is Outcome.O_WINS:
        return Side.O
    return Side.NONE


def play_series(ai_agent: Agent, opponent_agent: Agent, games: int, desc: str = "games") -> Tuple[int, int, int]:
    """
    Play a series with the AI alternating sides (X in even games).

    Returns:
        (wins, draws, losses) counted for ai_agent
    """
    wins = draws = losses = 0

    for g in trange(games, desc=desc, leave=False):
        ai_side = Side.X if (g % 2 == 0) else Side.O
        if ai_side == Side.X:
            winner = play_game(ai_agent, opponent_agent)
        else:
            winner = play_game(opponent_agent, ai_agent)

        if winner == Side.NONE:
            draws += 1
        elif winner == ai_side:
            wins += 1
        else:
            losses += 1
            tqdm.write(f"  {desc}: AI lost game {g} playing {ai_side.token}")

    return wins, draws, losses


def _rates(wins: int, draws: int, losses: int) -> Tuple[float, float, float]:
    total = wins + draws + losses
    if total == 0:
        return 0.0, 0.0, 0.0
    return wins / total, draws / total, losses / total


def eval_vs_random(games: int = 500, rng: Optional[np.random.Generator] = None) -> Tuple[float, float, float]:
    """
    Evaluate the AI vs a random opponent.

    Returns:
        (win_rate, draw_rate, loss_rate)
    """
    if rng is None:
        rng = np.random.default_rng(0)
    wins, draws, losses = play_series(search_agent, make_random_agent(rng), games, "vs random")
    return _rates(wins, draws, losses)


def eval_vs_solver(
    games: int = 500,
    rng: Optional[np.random.Generator] = None,
    optimal_random: bool = True,
) -> Dict[str, float]:
    """
    Evaluate the AI vs the exact solver.

    Returns:
        Dict with 'games', 'ai_w', 'ai_d', 'ai_l'
    """
    if rng is None:
        rng = np.random.default_rng(0)
    agent = make_solver_agent(rng, optimal_random=optimal_random)
    wins, draws, losses = play_series(search_agent, agent, games, "vs solver")
    w, d, l = _rates(wins, draws, losses)
    return {
        "games": wins + draws + losses,
        "ai_w": w,
        "ai_d": d,
        "ai_l": l,
    }
