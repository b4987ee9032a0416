from othello.agent import Agent, AgentConfig
from othello.core import GameResult, Side
from othello.evaluation import evaluate_agents, play_game


def test_pass_driven_game_fills_at_most_sixty_squares():
    record = play_game(
        Agent(Side.BLACK, AgentConfig(strategy="first_available")),
        Agent(Side.WHITE, AgentConfig(strategy="first_available")),
    )
    assert record.result != GameResult.ONGOING
    assert record.placements <= 60
    assert record.plies == len(record.moves)
    assert record.black_count + record.white_count == 4 + record.placements


def test_minimax_game_against_random():
    record = play_game(
        Agent(Side.BLACK, AgentConfig(depth=1)),
        Agent(Side.WHITE, AgentConfig(strategy="random", seed=2)),
        time_budget_ms=60_000,
    )
    assert record.result != GameResult.ONGOING
    assert record.as_dict()["plies"] == record.plies
    if record.black_count > record.white_count:
        assert record.result == GameResult.BLACK_WIN


def test_evaluate_random_vs_random_small():
    result = evaluate_agents(
        lambda side: Agent(side, AgentConfig(strategy="random", seed=0)),
        lambda side: Agent(side, AgentConfig(strategy="random", seed=1)),
        games=2,
    )
    assert result.games_played == 2
    assert result.black_wins + result.white_wins + result.draws == 2
    assert result.average_length > 0
    assert 0.0 <= result.winrate_black() <= 1.0
