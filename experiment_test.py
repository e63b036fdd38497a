# experiment_test.py
# PyTest unit tests for experiment.py

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

import experiment as exp


def test_random_point_set_is_within_range():
    rng = np.random.default_rng(0)
    ps = exp.random_point_set(200, rng, coord_range=10)
    arr = ps.to_array()
    assert 0 < len(ps) <= 200
    assert arr.min() >= -10 and arr.max() <= 10

def test_time_graham_scan_does_not_reorder_input():
    ps = exp.random_point_set(100, np.random.default_rng(1))
    before = ps.to_array().copy()
    assert exp.time_graham_scan(ps, repeats=2) >= 0.0
    np.testing.assert_array_equal(ps.to_array(), before)

def test_run_experiment_table():
    df = exp.run_experiment(sizes=[10, 100, 400], repeats=1, coord_range=50, seed=3)
    assert list(df.columns) == ["n", "points", "hull", "seconds", "nlogn", "theory_seconds", "ratio"]
    assert df["n"].tolist() == [10, 100, 400]
    assert (df["hull"] <= df["points"]).all()
    assert (df["points"] <= df["n"]).all()
    assert (df["seconds"] >= 0).all()
    # c is the median of seconds / nlogn, so the middle ratio is exactly 1
    assert sorted(df["ratio"].tolist())[1] == pytest.approx(1.0)

def test_run_experiment_no_sizes():
    df = exp.run_experiment(sizes=[], repeats=1)
    assert df.empty
    assert "ratio" in df.columns

def test_plot_runtime():
    df = exp.run_experiment(sizes=[10, 50], repeats=1, seed=4)
    fig = exp.plot_runtime(df, show=False)
    try:
        assert len(fig.axes[0].get_lines()) == 2
    finally:
        plt.close(fig)
