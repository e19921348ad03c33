"""Headless simulation driver: play rounds with the autopilot and summarize scores."""
from __future__ import annotations

import argparse
import logging
import random

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from .board import PlacementError
from .game_logic import MAX_GRID_SIZE, MIN_GRID_SIZE, GameConfig, GameState
from .utils import RoundResult, run_round


def _print_metric(name: str, values: np.ndarray) -> None:
    print(
        f"{name:<10} {float(values.mean()):>10.2f} {float(np.median(values)):>10.2f} "
        f"{float(values.max()):>10.2f} {float(values.min()):>10.2f} {float(values.std()):>10.2f} "
        f"{float(np.percentile(values, 25)):>10.2f} {float(np.percentile(values, 75)):>10.2f}"
    )


def round_window_means(scores: list[float], window: int) -> tuple[np.ndarray, np.ndarray]:
    """Mean score over consecutive windows of rounds, keyed by the last round number in each window."""
    if window <= 0:
        raise ValueError("window must be > 0")

    arr = np.asarray(scores, dtype=np.float32)
    if arr.size == 0:
        return np.array([], dtype=np.float32), np.array([], dtype=np.float32)

    windows = np.array_split(arr, list(range(window, arr.size, window)))
    last_rounds = np.cumsum([w.size for w in windows]).astype(np.float32)
    means = np.array([w.mean() for w in windows], dtype=np.float32)
    return last_rounds, means


def _save_score_plot(path: str, scores: list[float], window: int) -> None:
    fig, (ax_trend, ax_hist) = plt.subplots(1, 2, figsize=(12, 4.5))

    ax_trend.set_title(f"Average Score per {window} Rounds")
    ax_trend.set_xlabel("Round")
    ax_trend.set_ylabel("Score")
    ax_trend.grid(alpha=0.25)
    x_end, means = round_window_means(scores, window)
    if x_end.size > 0:
        ax_trend.plot(x_end, means, color="#1f77b4", linewidth=2.2, marker="o", markersize=3)

    ax_hist.set_title("Score Distribution")
    ax_hist.set_xlabel("Score")
    ax_hist.set_ylabel("Count")
    ax_hist.grid(alpha=0.2)
    if scores:
        ax_hist.hist(scores, bins=20, color="#44b5a4", alpha=0.85, edgecolor="#17323a")
        mean_all = float(np.mean(scores))
        ax_hist.axvline(mean_all, color="#1f77b4", linestyle="--", linewidth=1.6, label=f"Mean: {mean_all:.2f}")
        ax_hist.legend(loc="upper right")

    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)


def simulate(
    rounds: int,
    config: GameConfig,
    seed: int | None = None,
    max_ticks: int = 5000,
    plot_path: str | None = None,
) -> tuple[list[RoundResult], int]:
    """Play `rounds` rounds on one GameState and return the results plus the high score."""
    if rounds <= 0:
        raise ValueError("rounds must be > 0")

    state = GameState(config, rng=random.Random(seed))
    results: list[RoundResult] = []
    for round_index in range(1, rounds + 1):
        if round_index > 1:
            state.reset()
        results.append(run_round(state, max_ticks=max_ticks))
        if round_index % 10 == 0 or round_index == rounds:
            print(f"Round {round_index}/{rounds}", end="\r", flush=True)
    print()

    scores = np.asarray([r.score for r in results], dtype=np.float32)
    ticks = np.asarray([r.ticks for r in results], dtype=np.float32)
    unfinished = sum(1 for r in results if not r.finished)

    print("=" * 78)
    print(f"{'Metric':<10} {'Mean':>10} {'Median':>10} {'Max':>10} {'Min':>10} {'Std':>10} {'P25':>10} {'P75':>10}")
    print("-" * 78)
    _print_metric("Score", scores)
    _print_metric("Ticks", ticks)
    print("=" * 78)
    print(f"High score: {state.high_score}")
    if unfinished:
        print(f"{unfinished} round(s) hit the {max_ticks}-tick limit before game over.")

    if plot_path:
        _save_score_plot(plot_path, [float(s) for s in scores], window=max(1, rounds // 20))
        print(f"Saved plot to {plot_path}")

    return results, state.high_score


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    defaults = GameConfig()
    parser = argparse.ArgumentParser(description="Headless Snake simulation")
    parser.add_argument("--rounds", type=int, default=100, help="Number of rounds to play")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs")
    parser.add_argument(
        "--grid-size",
        type=int,
        default=defaults.grid_size,
        help=f"Board side length ({MIN_GRID_SIZE}-{MAX_GRID_SIZE}).",
    )
    parser.add_argument("--obstacles", type=int, default=defaults.obstacle_count)
    parser.add_argument("--lives", type=int, default=defaults.lives)
    parser.add_argument("--max-ticks", type=int, default=5000, help="Per-round step limit")
    parser.add_argument("--plot", type=str, default="", help="Optional PNG path for a score plot.")
    parser.add_argument("--verbose", action="store_true", help="Log life losses and round ends")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    if args.rounds <= 0:
        raise SystemExit("--rounds must be > 0.")
    if args.max_ticks <= 0:
        raise SystemExit("--max-ticks must be > 0.")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = GameConfig(grid_size=args.grid_size, obstacle_count=args.obstacles, lives=args.lives)
    except ValueError as exc:
        raise SystemExit(f"Invalid game settings: {exc}")

    try:
        simulate(args.rounds, config, seed=args.seed, max_ticks=args.max_ticks, plot_path=args.plot or None)
    except PlacementError as exc:
        raise SystemExit(f"Board too crowded: {exc}")


if __name__ == "__main__":
    main()
