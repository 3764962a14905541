#!/usr/bin/env python3
"""
Main script to launch Ping Pong, either in a PyGame window or headless
"""

import argparse
import logging
import sys

from ping_pong.core.driver import run_fixed_steps
from ping_pong.core.simulation import PongSimulation
from ping_pong.utils.config import game_config
from ping_pong.utils.config import load_config_from_file


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ping Pong: you against the computer")
    parser.add_argument("--config", help="JSON configuration file to load")
    parser.add_argument("--seed", type=int, default=None, help="Seed for serve angles")
    parser.add_argument(
        "--headless", action="store_true", help="Run without display, with an idle human paddle"
    )
    parser.add_argument(
        "--seconds", type=float, default=120.0, help="Simulated duration of a headless run"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)
    if args.seconds < 0:
        parser.error("--seconds must be non-negative")
    return args


def run_headless(seconds: float, seed: int | None) -> None:
    """Simulate a match at the maximum frame step and print the outcome"""
    simulation = PongSimulation(game_config, seed=seed)
    dt = game_config.MAX_FRAME_DT
    history = run_fixed_steps(simulation, int(seconds / dt), dt)

    hits = sum(len(events["paddle_hits"]) for events in history)
    left, right = simulation.round.score
    print(f"Simulated {len(history) * dt:.1f}s in {len(history)} steps, {hits} paddle hits")
    print(f"Play time: {simulation.game_time:.1f}s")
    print(f"Final score: {left} - {right}")
    if simulation.round.winner is not None:
        print(f"Winner: {simulation.round.winner.value}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.config and not load_config_from_file(args.config):
        print(f"Could not load configuration from {args.config}, using defaults")

    if args.headless:
        run_headless(args.seconds, args.seed)
        return 0

    from ping_pong.gui.game_app import main as gui_main

    print("=== PING PONG ===")
    print()
    print("CONTROLS:")
    print("  UP/DOWN arrows or mouse: Move your paddle (left)")
    print("  SPACE: Pause")
    print("  R: Restart")
    print("  F2: Show FPS")
    print("  F3: Show debug info")
    print("  ESC: Quit")
    print()

    gui_main(game_config, args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
