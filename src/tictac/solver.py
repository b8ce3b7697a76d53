"""
Exact minimax solver for TicTacToe with caching.

Lists every optimal move of a position; used to cross-check the
alpha-beta search and as a sparring partner in the arena.
"""

from typing import Dict, Iterator, List, Tuple

from .board import Side, is_full, is_legal_board, is_terminal, is_win, legal_moves, side_to_move


# Cache: (me, opp) -> (value, best_moves_tuple)
_SOLVER_CACHE: Dict[Tuple[int, int], Tuple[int, Tuple[int, ...]]] = {}


def solve(me: int, opp: int) -> Tuple[int, List[int]]:
    """
    Compute minimax value and all best moves from the mover's side.

    Args:
        me: bitmask of the side to move
        opp: bitmask of the side that just moved

    Returns:
        (value, best_moves) where:
        - value: +1 (win), 0 (draw), -1 (loss) for the side to move
        - best_moves: ascending list of cells achieving the value,
          empty for a terminal position
    """
    key = (me, opp)
    if key in _SOLVER_CACHE:
        v, best = _SOLVER_CACHE[key]
        return v, list(best)

    if is_win(opp):
        _SOLVER_CACHE[key] = (-1, tuple())
        return -1, []
    if is_full(me, opp):
        _SOLVER_CACHE[key] = (0, tuple())
        return 0, []

    best_v = -2
    best_moves: List[int] = []

    for cell in legal_moves(me, opp):
        child_v, _ = solve(opp, me | (1 << cell))
        v_here = -child_v  # Negate for opponent's perspective

        if v_here > best_v:
            best_v = v_here
            best_moves = [cell]
        elif v_here == best_v:
            best_moves.append(cell)

    _SOLVER_CACHE[key] = (best_v, tuple(best_moves))
    return best_v, best_moves


def optimal_moves(me: int, opp: int) -> List[int]:
    return solve(me, opp)[1]


def clear_cache():
    """Clear solver cache."""
    _SOLVER_CACHE.clear()


def cache_size() -> int:
    """Return current cache size."""
    return len(_SOLVER_CACHE)


def iter_all_legal_nonterminal_states() -> Iterator[Tuple[int, int, Side]]:
    """
    Iterate over all legal non-terminal positions.

    Yields:
        (x, o, side_to_move) tuples for exhaustive evaluation.
    """
    for n in range(3**9):
        # Decode base-3 representation: 1 = X, 2 = O
        x = o = 0
        for i in range(9):
            d = n % 3
            n //= 3
            if d == 1:
                x |= 1 << i
            elif d == 2:
                o |= 1 << i

        if not is_legal_board(x, o):
            continue

        done, _ = is_terminal(x, o)
        if done:
            continue

        yield x, o, side_to_move(x, o)
