import numpy as np

from tictac.arena import (
    eval_vs_random,
    eval_vs_solver,
    make_random_agent,
    make_solver_agent,
    play_game,
    play_series,
    search_agent,
)
from tictac.board import Side


def test_self_play_is_a_draw():
    assert play_game(search_agent, search_agent) == Side.NONE


def test_random_agent_plays_legal_moves():
    agent = make_random_agent(np.random.default_rng(1))
    for _ in range(20):
        assert agent(0b000010001, 0b100000000) in (1, 2, 3, 5, 6, 7)


def test_solver_agent_first_move():
    agent = make_solver_agent(np.random.default_rng(0), optimal_random=False)
    assert agent(0, 1) == 4


def test_never_loses_to_random():
    w, d, l = eval_vs_random(60, np.random.default_rng(3))
    assert l == 0
    assert abs(w + d - 1.0) < 1e-9
    assert w > 0


def test_always_draws_against_solver():
    results = eval_vs_solver(20, np.random.default_rng(5))
    assert results["games"] == 20
    assert results["ai_l"] == 0
    assert results["ai_d"] == 1.0


def test_deterministic_solver_opponent():
    results = eval_vs_solver(4, optimal_random=False)
    assert results["ai_d"] == 1.0


def test_random_agent_uses_only_empty_cells():
    agent = make_random_agent(np.random.default_rng(2))
    assert {agent(0b011111111, 0) for _ in range(5)} == {8}


def test_zero_games_give_zero_rates():
    assert eval_vs_random(0) == (0.0, 0.0, 0.0)
    assert eval_vs_solver(0) == {"games": 0, "ai_w": 0.0, "ai_d": 0.0, "ai_l": 0.0}


def test_losses_are_reported(capsys):
    rng = np.random.default_rng(11)
    weak = make_random_agent(rng)
    strong = make_solver_agent(rng)

    wins, draws, losses = play_series(weak, strong, 40, desc="weak")

    assert wins == 0
    assert wins + draws + losses == 40
    assert losses > 0
    out = capsys.readouterr().out
    assert out.count("weak: AI lost game") == losses
