#!/usr/bin/env python3
"""
Play TicTacToe against the alpha-beta AI.

Usage:
    python play.py                       # Window with pre-game menu
    python play.py --ai x                # Window, AI opens, no menu
    python play.py --terminal            # Play in the shell, you are X
    python play.py --terminal --ai x     # AI opens
    python play.py --terminal --ai none  # Two players
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictac import (
    GuiConfig,
    Side,
    new_game,
    is_ai_turn,
    is_legal_move,
    legal_moves,
    play_move,
    opponent,
    outcome_message,
)
from tictac.board import cells
from tictac.game import choose_ai_cell


def print_board(state):
    """Pretty print board."""
    symbols = {Side.NONE: ' ', Side.X: 'X', Side.O: 'O'}
    owners = cells(*state.occupancy)
    for i in range(3):
        row = "|".join(symbols[owners[i*3 + j]] for j in range(3))
        print(row)
        if i < 2:
            print("-+-+-")


def play_terminal(ai: Side):
    """Play one game in the terminal."""
    state = new_game(ai)

    print("\n=== Interactive Game ===")
    if ai == Side.NONE:
        print("Two players, X plays first")
    else:
        print(f"You are {opponent(ai).token}, AI is {ai.token}")
    print("Enter moves as numbers 0-8:")
    print(" 0 | 1 | 2 ")
    print("---+---+---")
    print(" 3 | 4 | 5 ")
    print("---+---+---")
    print(" 6 | 7 | 8 ")
    print()

    while not state.over:
        print_board(state)
        print()

        if is_ai_turn(state):
            cell = choose_ai_cell(state)
            state = play_move(state, cell)
            print(f"AI plays: {cell}")
        else:
            moves = legal_moves(*state.occupancy)
            try:
                action = int(input(f"{state.current.token} to move ({moves}): "))
            except ValueError:
                print("Invalid move, try again")
                continue
            except (EOFError, KeyboardInterrupt):
                print("\nGame aborted")
                return
            if not is_legal_move(state, action):
                print("Invalid move, try again")
                continue
            state = play_move(state, action)
        print()

    print_board(state)
    print(f"\n{outcome_message(state)}")


def main():
    parser = argparse.ArgumentParser(description="Play TicTacToe")
    parser.add_argument("--terminal", action="store_true", help="Play in the terminal instead of a window")
    parser.add_argument("--ai", type=str, choices=["x", "o", "none"], default=None,
                        help="Side played by the AI; skips the window menu (terminal default: o)")
    parser.add_argument("--window-size", type=int, default=600, help="Window size in pixels")
    parser.add_argument("--font", type=str, default=None, help="Path to a TTF font")

    args = parser.parse_args()

    ai = {"x": Side.X, "o": Side.O, "none": Side.NONE, None: None}[args.ai]

    if args.terminal:
        play_terminal(Side.O if ai is None else ai)
        return

    # Imported here so terminal play works without a display
    from tictac.gui import run

    config = GuiConfig(window_size=args.window_size, font_path=args.font)
    state = run(config, ai=ai)
    if state is not None:
        print(outcome_message(state))


if __name__ == "__main__":
    main()
