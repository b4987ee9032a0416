import json
import sys

from othello.search import PhaseWeights

from scripts.play_match import build_agent_config, load_yaml_config, main


def test_load_yaml_config(tmp_path):
    path = tmp_path / "match.yaml"
    path.write_text("games: 3\nblack:\n  strategy: random\n")
    cfg = load_yaml_config(str(path))
    assert cfg["games"] == 3
    assert cfg["black"]["strategy"] == "random"
    assert load_yaml_config(str(tmp_path / "missing.yaml")) == {}
    assert load_yaml_config(None) == {}


def test_build_agent_config_merges_weights():
    config = build_agent_config(
        {
            "strategy": "minimax",
            "depth": 2,
            "weights": {"late": {"pieces": 2.0}, "late_game_ply": 10},
        }
    )
    assert config.depth == 2
    assert config.weights.late == PhaseWeights(mobility=1.0, pieces=2.0, corners=7.0)
    assert config.weights.early == PhaseWeights()
    assert config.weights.late_game_ply == 10


def test_main_prints_json_summary(tmp_path, monkeypatch, capsys):
    path = tmp_path / "match.yaml"
    path.write_text(
        "games: 1\n"
        "black:\n  strategy: first_available\n"
        "white:\n  strategy: space_value\n"
    )
    monkeypatch.setattr(sys, "argv", ["play_match.py", "--config", str(path)])

    main()

    output = json.loads(capsys.readouterr().out)
    assert output["games_played"] == 1
    assert output["black"] == "first_available"
    assert output["white"] == "space_value"
