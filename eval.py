#!/usr/bin/env python3
"""
Evaluate the alpha-beta AI in the arena.

Usage:
    python eval.py
    python eval.py --games 1000 --seed 7
    python eval.py --solver-first-move
"""

import sys
import argparse
from pathlib import Path

import numpy as np

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictac import ArenaConfig, eval_vs_random, eval_vs_solver


def main():
    parser = argparse.ArgumentParser(description="Evaluate TicTacToe AI")
    parser.add_argument("--games", type=int, default=500, help="Number of games per opponent")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--solver-first-move", action="store_true",
                        help="Solver always plays its lowest-index optimal move")

    args = parser.parse_args()
    if args.games < 1:
        parser.error("--games must be at least 1")

    config = ArenaConfig(
        games=args.games,
        seed=args.seed,
        solver_plays_optimal_random=not args.solver_first_move,
    )
    rng = np.random.default_rng(config.seed)

    print("\n=== Evaluation ===")

    # vs Random
    print(f"\nvs Random ({config.games} games)...")
    w, d, l = eval_vs_random(config.games, rng)
    print(f"  Wins:   {w:.2%}")
    print(f"  Draws:  {d:.2%}")
    print(f"  Losses: {l:.2%}")

    # vs Solver
    print(f"\nvs Solver ({config.games} games)...")
    results = eval_vs_solver(config.games, rng, optimal_random=config.solver_plays_optimal_random)
    print(f"  Wins:   {results['ai_w']:.2%}")
    print(f"  Draws:  {results['ai_d']:.2%}")
    print(f"  Losses: {results['ai_l']:.2%}")

    if l > 0 or results["ai_l"] > 0:
        print("\nAI lost at least one game")
        sys.exit(1)


if __name__ == "__main__":
    main()
