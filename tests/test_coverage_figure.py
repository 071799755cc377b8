import numpy as np
from collatz_coverage import explore
from tools.coverage_figure import band_coverage, plot_coverage, plot_strategy_sweep


def test_band_coverage_fractions():
    edges, frac = band_coverage([(1, 50)], 101, n_bands=2)
    assert len(edges) == 3
    assert np.allclose(frac, [1.0, 0.0])


def test_band_coverage_empty():
    _, frac = band_coverage([], 64, n_bands=4)
    assert np.all(frac == 0)


def test_plot_coverage_writes_png(tmp_path):
    result = explore(1024)
    out = plot_coverage(result, tmp_path / "coverage.png")
    assert out.exists()
    assert out.stat().st_size > 0


def test_strategy_sweep(tmp_path):
    out, runs = plot_strategy_sweep(range(4, 9), tmp_path / "sweep.png")
    assert out.exists()
    assert set(runs) == {'recursive', 'stack', 'iterative'}
    for stats in runs.values():
        assert [s.ceiling for s in stats] == [16, 32, 64, 128, 256]
    # same content whichever way it was explored
    covered = {name: [s.covered for s in stats] for name, stats in runs.items()}
    assert covered['recursive'] == covered['stack'] == covered['iterative']
