"""Tests for the physics analysis charts."""

import os

from pongsim.analysis import FRAME_RATES, frame_rate_drift, generate_all_charts


def test_frame_rates_agree():
    """The reference serve ends within half a pixel at every frame rate."""
    results = frame_rate_drift(max_time=2.0)
    assert set(results) == set(FRAME_RATES)

    finals = [r["final"] for r in results.values()]
    xs = [f[0] for f in finals]
    ys = [f[1] for f in finals]
    assert max(xs) - min(xs) < 0.5
    assert max(ys) - min(ys) < 0.5


def test_generate_all_charts(tmp_path):
    paths = generate_all_charts(output_dir=str(tmp_path))
    assert len(paths) == 3
    for path in paths:
        assert os.path.exists(path)
        assert os.path.getsize(path) > 0
