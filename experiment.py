"""
Module: experiment
Description: Empirically evaluate the Graham scan.
             - Generate random integer 2D point sets.
             - Measure runtime of graham_scan (median of several repeats).
             - Compare against theoretical O(n log n) growth (normalized n log n curve).
             - Optionally plot runtime vs theory.

Usage:
    python experiment.py --plot
    python experiment.py --sizes 1000 5000 20000 --repeats 5
"""

import argparse
import logging
import math
import time
from statistics import median
from typing import Iterable, List, Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from config import (EXPERIMENT_COORD_RANGE, EXPERIMENT_REPEATS, EXPERIMENT_SEED,
                    EXPERIMENT_SIZES)
from convex_hull import graham_scan
from logging_config import get_logger, setup_logging
from point_set import PointSet

logger = get_logger("experiment")


def random_point_set(n: int, rng: np.random.Generator,
                     coord_range: int = EXPERIMENT_COORD_RANGE) -> PointSet:
    """n random points in [-coord_range, coord_range]^2 (duplicates dropped)."""
    pts = rng.integers(-coord_range, coord_range + 1, size=(n, 2))
    return PointSet.from_pairs(pts)


def time_graham_scan(point_set: PointSet, repeats: int = EXPERIMENT_REPEATS) -> float:
    """
    Median wall time of graham_scan over `repeats` runs.
    Each run works on a fresh copy, since the scan reorders its input.
    """
    timings = []
    for _ in range(repeats):
        working = point_set.copy()
        t0 = time.perf_counter()
        graham_scan(working)
        timings.append(time.perf_counter() - t0)
    return median(timings)


def run_experiment(sizes: Iterable[int] = EXPERIMENT_SIZES,
                   repeats: int = EXPERIMENT_REPEATS,
                   coord_range: int = EXPERIMENT_COORD_RANGE,
                   seed: int = EXPERIMENT_SEED) -> pd.DataFrame:
    """
    One row per input size with columns
      n, points (distinct), hull, seconds, nlogn, theory_seconds, ratio.
    The theory curve is c * n log n with c fitted as the median of
    seconds / (n log n), so ratio ~ 1 means n log n growth.
    """
    rng = np.random.default_rng(seed)
    rows = []
    for n in sizes:
        point_set = random_point_set(n, rng, coord_range)
        hull = graham_scan(point_set.copy())
        seconds = time_graham_scan(point_set, repeats)
        rows.append({
            "n": n,
            "points": len(point_set),
            "hull": len(hull),
            "seconds": seconds,
            "nlogn": n * math.log2(n) if n > 1 else 1.0,
        })
        logger.info("n=%d hull=%d time=%.4fs", n, len(hull), seconds)

    df = pd.DataFrame(rows, columns=["n", "points", "hull", "seconds", "nlogn"])
    if df.empty:
        df["theory_seconds"] = pd.Series(dtype=float)
        df["ratio"] = pd.Series(dtype=float)
        return df

    c = median((df["seconds"] / df["nlogn"]).tolist())
    df["theory_seconds"] = c * df["nlogn"]
    df["ratio"] = df["seconds"] / df["theory_seconds"]
    return df


def plot_runtime(df: pd.DataFrame, show: bool = True):
    fig = plt.figure()
    plt.plot(df["n"], df["seconds"], "o-", label="Graham scan (measured)")
    plt.plot(df["n"], df["theory_seconds"], "--", label="c * n log n")
    plt.xlabel("n")
    plt.ylabel("seconds")
    plt.title("Graham scan runtime vs O(n log n)")
    plt.legend()
    if show:
        plt.show()
    return fig


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Graham scan runtime vs n log n.")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(EXPERIMENT_SIZES),
                        help="Input sizes to measure.")
    parser.add_argument("--repeats", type=int, default=EXPERIMENT_REPEATS,
                        help="Runs per size; the median is reported.")
    parser.add_argument("--coord-range", type=int, default=EXPERIMENT_COORD_RANGE,
                        help="Coordinates are drawn from [-range, range].")
    parser.add_argument("--seed", type=int, default=EXPERIMENT_SEED)
    parser.add_argument("--plot", action="store_true", help="Plot runtime vs theory.")
    args = parser.parse_args(argv)

    setup_logging(logging.INFO)
    df = run_experiment(args.sizes, args.repeats, args.coord_range, args.seed)
    print(df.to_string(index=False))
    if args.plot:
        plot_runtime(df)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
