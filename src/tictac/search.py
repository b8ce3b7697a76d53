"""
Alpha-beta search for the AI's move.

Exhaustive negamax over the empty cells with alpha-beta pruning. Scores
are from the perspective of the side to move: +1 win, 0 draw, -1 loss.
A win in one move and a forced win many moves later both score +1.
"""

from typing import NamedTuple, Optional

from .board import is_full, is_win

# Evaluation scores
WIN = 1
DRAW = 0
LOSS = -1


class SearchResult(NamedTuple):
    """Score of a position and a cell achieving it (None on a full board)."""
    score: int
    move: Optional[int]


def alpha_beta(me: int, opp: int, achievable: int, cutoff: int) -> SearchResult:
    """
    Determine the best move using recursive search.

    Args:
        me: bitmask of cells the side to move occupies
        opp: bitmask of cells the opponent occupies
        achievable: score of best variation found so far
        cutoff: if we can find a move better than this our opponent
            will avoid this variation, so we can stop searching

    Returns:
        SearchResult(score, move). The lowest-index legal cell is kept
        unless a later cell scores strictly better.
    """
    if is_full(me, opp):
        return SearchResult(DRAW, None)

    taken = me | opp
    best_move = None

    for i in range(9):
        bit = 1 << i
        if taken & bit:
            continue
        tmp = me | bit
        if is_win(tmp):
            cur = WIN
        else:
            cur = -alpha_beta(opp, tmp, -cutoff, -achievable).score

        if best_move is None:
            best_move = i
        if cur > achievable:
            achievable = cur
            best_move = i
        if achievable >= cutoff:
            break

    return SearchResult(achievable, best_move)


def evaluate_and_choose(me: int, opp: int) -> SearchResult:
    """
    Pick the AI's move.

    A move that wins on the spot is taken first; otherwise searches with
    a window wider than any score so no winning move is pruned at the
    root.
    """
    taken = me | opp
    for i in range(9):
        bit = 1 << i
        if not taken & bit and is_win(me | bit):
            return SearchResult(WIN, i)

    return alpha_beta(me, opp, LOSS - 1, WIN + 1)
