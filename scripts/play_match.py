#!/usr/bin/env python3
"""Play a series of games between two configured agents and report results."""

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Dict, Optional

import yaml

from othello import Agent, AgentConfig, EvaluatorWeights, Side, evaluate_agents


def load_yaml_config(path_str: Optional[str]) -> Dict:
    if not path_str:
        return {}
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def build_agent_config(cfg: Dict) -> AgentConfig:
    cfg = dict(cfg)
    weights_cfg = dict(cfg.pop("weights", None) or {})
    defaults = EvaluatorWeights()
    weights = EvaluatorWeights(
        early=replace(defaults.early, **weights_cfg.get("early", {})),
        late=replace(defaults.late, **weights_cfg.get("late", {})),
        late_game_ply=weights_cfg.get("late_game_ply", defaults.late_game_ply),
    )
    return AgentConfig(weights=weights, **cfg)


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Othello agents against each other.")
    parser.add_argument("--config", type=str, default="configs/match.yaml")
    parser.add_argument("--games", type=int)
    parser.add_argument("--black-strategy")
    parser.add_argument("--white-strategy")
    parser.add_argument("--depth", type=int, help="Search depth for both agents")
    parser.add_argument("--time-budget-ms", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    cfg = load_yaml_config(args.config)
    games = args.games if args.games is not None else cfg.get("games", 1)
    time_budget_ms = args.time_budget_ms if args.time_budget_ms is not None else cfg.get("time_budget_ms")

    side_cfgs = {}
    for side, strategy in ((Side.BLACK, args.black_strategy), (Side.WHITE, args.white_strategy)):
        side_cfg = dict(cfg.get(side.name.lower()) or {})
        if strategy is not None:
            side_cfg["strategy"] = strategy
        if args.depth is not None:
            side_cfg["depth"] = args.depth
        if args.seed is not None:
            side_cfg["seed"] = args.seed + int(side)
        side_cfgs[side] = build_agent_config(side_cfg)

    result = evaluate_agents(
        lambda side: Agent(side, side_cfgs[side]),
        lambda side: Agent(side, side_cfgs[side]),
        games=games,
        time_budget_ms=time_budget_ms,
    )
    output = {
        "games_played": result.games_played,
        "black_wins": result.black_wins,
        "white_wins": result.white_wins,
        "draws": result.draws,
        "black_winrate": result.winrate_black(),
        "average_length": result.average_length,
        "black": side_cfgs[Side.BLACK].strategy,
        "white": side_cfgs[Side.WHITE].strategy,
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
