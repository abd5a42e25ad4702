#!/usr/bin/env python3
"""
Minesweeper engine - Main entry point.

Usage:
    python main.py play [--difficulty NAME]
    python main.py evaluate [--agent {random,logic}] [--games N]
    python main.py compare [--games N]
    python main.py demo [--delay SECONDS] [--games N]
    python main.py difficulties
"""
import argparse
import logging
import os
import sys
import time

from minesweeper_engine import MinesweeperError
from minesweeper_engine.agents import LogicAgent, RandomAgent
from minesweeper_engine.evaluation import EvaluationConfig, Evaluator
from minesweeper_engine.game import (
    DIFFICULTIES,
    MinesweeperEnv,
    get_difficulty,
    select_difficulty,
)
from minesweeper_engine.shell import HELP, TextShell


def play(args: argparse.Namespace) -> None:
    """Play an interactive game on stdin."""
    shell = TextShell(select_difficulty(get_difficulty(args.difficulty)))
    print(HELP)
    print(shell.status())

    while not shell.finished:
        try:
            line = input("> ")
        except EOFError:
            break
        print(shell.handle(line))


def make_agent(name: str, difficulty: str, seed=None):
    """Build an agent sized for the difficulty."""
    profile = get_difficulty(difficulty)
    if name == "random":
        return RandomAgent(profile.rows, profile.cols, seed=seed)
    return LogicAgent(profile.rows, profile.cols, seed=seed)


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate a specific agent."""
    config = EvaluationConfig(
        difficulty=args.difficulty, games=args.games, seed=args.seed
    )
    agent = make_agent(args.agent, args.difficulty, seed=args.seed)
    name = args.agent.capitalize()

    print(f"\nEvaluating {name} over {config.games} {config.difficulty} games...")
    evaluator = Evaluator(config)
    results = evaluator.evaluate(agent)

    print(f"Results for {name}:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")

    if args.output:
        path = evaluator.save_results({name: results}, args.output)
        print(f"Results saved to: {path}")


def compare(args: argparse.Namespace) -> None:
    """Compare all agents."""
    config = EvaluationConfig(
        difficulty=args.difficulty, games=args.games, seed=args.seed
    )
    agents = {
        "Random": make_agent("random", args.difficulty, seed=args.seed),
        "Logic": make_agent("logic", args.difficulty, seed=args.seed),
    }

    evaluator = Evaluator(config)
    results = evaluator.compare(agents)

    print("\n" + "=" * 50)
    print(f"Agent Comparison Results ({config.difficulty})")
    print("=" * 50)
    print(f"{'Agent':<20} {'Win Rate':<12} {'Avg Reward':<12} {'Avg Steps':<10}")
    print("-" * 50)

    for name, metrics in results.items():
        print(
            f"{name:<20} {metrics['win_rate']:>10.1%} "
            f"{metrics['avg_reward']:>10.2f} "
            f"{metrics['avg_steps']:>10.1f}"
        )

    if args.output:
        path = evaluator.save_results(results, args.output)
        print(f"Results saved to: {path}")


def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


def demo(args: argparse.Namespace) -> None:
    """Watch the logic agent play, one move per frame."""
    profile = get_difficulty(args.difficulty)
    env = MinesweeperEnv(profile, render_mode="ansi")
    agent = make_agent("logic", args.difficulty, seed=args.seed)

    obs, _ = env.reset(seed=args.seed)
    wins = 0
    for game in range(1, args.games + 1):
        if game > 1:
            obs, _ = env.reset()
        agent.reset()
        header = f"=== Game {game}/{args.games} | Wins: {wins} ==="
        move = "Start"

        while True:
            clear_screen()
            print(f"{header}\n{move}\n")
            print(env.render())
            time.sleep(args.delay)

            action = agent.select_action(obs, env.get_action_mask())
            move = env.describe_action(action)
            obs, _, terminated, truncated, info = env.step(action)
            if terminated or truncated:
                break

        won = info.get("game_state") == "WON"
        wins += won
        clear_screen()
        print(f"{header}\n{move}\n")
        print(env.render())
        print("\n*** WIN ***" if won else "\n*** LOST ***")
        time.sleep(1.0)

    print(f"\nFinal: {wins}/{args.games} wins ({wins / max(args.games, 1):.0%})")


def difficulties(args: argparse.Namespace) -> None:
    """List the difficulty tiers."""
    for name, profile in DIFFICULTIES.items():
        print(
            f"{name:<8} {profile.label:<16} {profile.mine_count:>3} mines "
            f"({profile.density:.1%} density)"
        )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper engine - play and evaluate agents"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log engine events"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--difficulty", default="normal", help="Difficulty tier"
    )

    eval_parser = subparsers.add_parser("evaluate", help="Evaluate an agent")
    eval_parser.add_argument(
        "--agent",
        choices=["random", "logic"],
        default="logic",
        help="Agent to evaluate",
    )

    compare_parser = subparsers.add_parser("compare", help="Compare all agents")

    for sub in (eval_parser, compare_parser):
        sub.add_argument(
            "--difficulty", default="normal", help="Difficulty tier"
        )
        sub.add_argument(
            "--games", type=int, default=100, help="Number of games to play"
        )
        sub.add_argument(
            "--seed", type=int, default=None, help="Seed for reproducible runs"
        )
        sub.add_argument(
            "--output", default=None, help="Write results to this JSON file"
        )

    demo_parser = subparsers.add_parser("demo", help="Watch the logic agent play")
    demo_parser.add_argument(
        "--difficulty", default="normal", help="Difficulty tier"
    )
    demo_parser.add_argument(
        "--games", type=int, default=5, help="Number of games to watch"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Seconds between moves"
    )
    demo_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible runs"
    )

    subparsers.add_parser("difficulties", help="List difficulty tiers")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    commands = {
        "play": play,
        "evaluate": evaluate,
        "compare": compare,
        "demo": demo,
        "difficulties": difficulties,
    }
    if args.command not in commands:
        parser.print_help()
        return

    try:
        commands[args.command](args)
    except MinesweeperError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
