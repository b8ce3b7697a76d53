"""
TicTacToe board rules on bitboards.

Board representation: two ints, one per side, used as 9-bit fields
  - bit i set: the side occupies cell i
  - cells are row-major, 0 = top-left, 8 = bottom-right

    0 | 1 | 2
   ---+---+---
    3 | 4 | 5
   ---+---+---
    6 | 7 | 8

Side: X (moves first), O, or NONE (no AI / no winner)
"""

from enum import IntEnum
from typing import List, Tuple

FULL = 0o777

# Winning lines as bitmasks (rows, columns, diagonals)
WIN_PATTERNS = (
    0o007, 0o070, 0o700,  # rows
    0o111, 0o222, 0o444,  # columns
    0o421, 0o124,         # diagonals
)


class Side(IntEnum):
    X = 0
    O = 1
    NONE = -1

    @property
    def token(self) -> str:
        return {Side.X: "X", Side.O: "O"}.get(self, "?")


def opponent(side: Side) -> Side:
    """Return the other playing side."""
    if side == Side.NONE:
        raise ValueError("Side.NONE has no opponent")
    return Side((side + 1) % 2)


def cell_bit(cell: int) -> int:
    """Return the single-bit mask for a cell index."""
    if not 0 <= cell < 9:
        raise ValueError(f"cell index out of range: {cell}")
    return 1 << cell


def cell_at(row: int, col: int) -> int:
    """Convert (row, col) to flat index."""
    return row * 3 + col


def popcount(mask: int) -> int:
    return bin(mask).count("1")


def is_win(occupancy: int) -> bool:
    """
    Check if one side's occupancy contains three in a row.

    Must be called with a single side's mask: the union of both sides
    would match lines of mixed ownership.
    """
    for pattern in WIN_PATTERNS:
        if occupancy & pattern == pattern:
            return True
    return False


def is_full(a: int, b: int) -> bool:
    """Return True if every cell is claimed by one of the two sides."""
    return (a | b) == FULL


def legal_moves(a: int, b: int) -> List[int]:
    """Return list of empty cell indices, ascending."""
    taken = a | b
    return [i for i in range(9) if not taken & (1 << i)]


def apply_move(occupancy: int, cell: int) -> int:
    """Claim a cell and return the new occupancy."""
    return occupancy | cell_bit(cell)


def side_to_move(x: int, o: int) -> Side:
    """Infer side to move from occupancy counts (X plays first)."""
    return Side.X if popcount(x) == popcount(o) else Side.O


def is_terminal(x: int, o: int) -> Tuple[bool, Side]:
    """
    Check if the position is over.

    Win is checked before full board, since a winning move may also
    fill the last cell.

    Returns:
        (is_terminal, winner) where winner is Side.NONE for a draw or
        an ongoing game
    """
    if is_win(x):
        return True, Side.X
    if is_win(o):
        return True, Side.O
    if is_full(x, o):
        return True, Side.NONE
    return False, Side.NONE


def is_legal_board(x: int, o: int) -> bool:
    """Check if a pair of masks respects the game rules."""
    if x & o or (x | o) & ~FULL:
        return False

    # X goes first, so x_cnt == o_cnt or x_cnt == o_cnt + 1
    x_cnt, o_cnt = popcount(x), popcount(o)
    if not (x_cnt == o_cnt or x_cnt == o_cnt + 1):
        return False

    # Can't have both winners
    if is_win(x) and is_win(o):
        return False

    return True


def cells(x: int, o: int) -> List[Side]:
    """Return the owner of every cell (Side.NONE when empty)."""
    owners = []
    for i in range(9):
        bit = 1 << i
        if x & bit:
            owners.append(Side.X)
        elif o & bit:
            owners.append(Side.O)
        else:
            owners.append(Side.NONE)
    return owners
