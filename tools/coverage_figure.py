"""
Coverage figures for exploration runs.

plot_coverage draws one run. It shows the proven ranges laid out over
[1, ceiling) and the fraction of each value band that has been covered.
plot_strategy_sweep reruns every strategy across a range of ceilings and
compares coverage, tree size and the depth of each work store.

Usage:
    from collatz_coverage import explore
    from tools.coverage_figure import plot_coverage, plot_strategy_sweep

    plot_coverage(explore(1 << 16))                  # figures/coverage_16.png
    plot_strategy_sweep(range(4, 17), "sweep.png")
"""

import sys
import numpy as np
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(_ROOT))
from collatz_coverage import Strategy, explore

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib import gridspec

FIG_DIR = _ROOT / "figures"

STRATEGY_COLORS = {
    'recursive': '#e74c3c',
    'stack': '#f39c12',
    'iterative': '#3498db',
}


# ----------------------------------------------------------
# Theme
# ----------------------------------------------------------
def _apply_dark_theme():
    plt.rcParams.update({
        'figure.facecolor': '#181818',
        'axes.facecolor': '#181818',
        'axes.edgecolor': '#444444',
        'axes.labelcolor': 'white',
        'text.color': 'white',
        'xtick.color': '#cccccc',
        'ytick.color': '#cccccc',
    })


def dark_ax(ax):
    ax.set_facecolor('#181818')
    for spine in ax.spines.values():
        spine.set_color('#444444')
    ax.tick_params(colors='#cccccc', labelsize=7)
    return ax


def _create_figure(n_panels, title, cols, figsize):
    _apply_dark_theme()
    fig = plt.figure(figsize=figsize, facecolor='#181818')
    gs = gridspec.GridSpec(1, cols, figure=fig, wspace=0.3, left=0.06,
                           right=0.97, top=0.85, bottom=0.14)
    fig.suptitle(title, fontsize=14, fontweight='bold', color='white')
    axes = [dark_ax(fig.add_subplot(gs[0, i])) for i in range(n_panels)]
    return fig, axes


def _save(fig, out):
    out = Path(out)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out, dpi=150, facecolor='#181818')
    plt.close(fig)
    return out


# ----------------------------------------------------------
# Band coverage
# ----------------------------------------------------------
def band_coverage(ranges, ceiling, n_bands=64):
    """Fraction of each of n_bands equal bands of [1, ceiling) that is covered.

    Returns (edges, fractions). The edges are band boundaries, so there is
    one more edge than there are fractions.
    """
    edges = np.linspace(1, ceiling, n_bands + 1)
    if not ranges:
        return edges, np.zeros(n_bands)
    lo = np.array([r[0] for r in ranges], dtype=float)
    hi = np.array([r[1] for r in ranges], dtype=float) + 1
    # covered integers below each edge, summed over all ranges
    below = np.clip(edges[:, None] - lo[None, :], 0, (hi - lo)[None, :]).sum(axis=1)
    widths = np.diff(edges)
    return edges, np.diff(below) / widths


# ----------------------------------------------------------
# Figures
# ----------------------------------------------------------
def plot_coverage(result, out=None, n_bands=64):
    """Figure of one ExplorationResult. Returns the saved path."""
    stats = result.stats
    ranges = list(result.range_set.traverse())
    ceiling = stats.ceiling
    title = (f"Reverse Collatz coverage below {ceiling} ({stats.strategy}): "
             f"{stats.percent_covered}% covered, proven [1, {stats.proven_last}]")
    fig, axes = _create_figure(2, title, cols=2, figsize=(16, 5))

    ax = axes[0]
    ax.broken_barh([(lo, hi - lo + 1) for lo, hi in ranges], (0, 1),
                   facecolors='#2ecc71')
    if stats.proven_last:
        ax.broken_barh([(1, stats.proven_last)], (1.1, 0.4),
                       facecolors='#f1c40f')
    ax.set_xlim(1, ceiling)
    ax.set_ylim(0, 1.6)
    ax.set_yticks([0.5, 1.3])
    ax.set_yticklabels(['covered', 'proven'], fontsize=8)
    ax.set_xlabel("n", fontsize=10)
    ax.set_title(f"{len(ranges)} ranges, {stats.nodes} nodes", fontsize=11)

    ax = axes[1]
    edges, frac = band_coverage(ranges, ceiling, n_bands)
    ax.bar(edges[:-1], frac, width=np.diff(edges), align='edge',
           color='#2ecc71', alpha=0.85)
    ax.set_xlim(1, ceiling)
    ax.set_ylim(0, 1.05)
    ax.set_xlabel("n", fontsize=10)
    ax.set_ylabel("covered fraction", fontsize=10)
    ax.set_title(f"Coverage per band ({n_bands} bands)", fontsize=11)

    if out is None:
        out = FIG_DIR / f"coverage_{ceiling.bit_length() - 1}.png"
    return _save(fig, out)


def plot_strategy_sweep(log2_ceilings, out=None):
    """Run every strategy for each ceiling 2**k and plot their statistics.

    Returns (saved path, {strategy: [ExplorationStats, ...]}).
    """
    log2_ceilings = list(log2_ceilings)
    runs = {s.value: [explore(1 << k, s, overflow='grow').stats
                      for k in log2_ceilings]
            for s in Strategy}

    fig, axes = _create_figure(3, "Exploration strategies by ceiling",
                               cols=3, figsize=(18, 5))
    for name, stats in runs.items():
        color = STRATEGY_COLORS[name]
        axes[0].plot(log2_ceilings, [s.percent_covered for s in stats], 'o-',
                     color=color, label=name, linewidth=2, markersize=5)
        axes[1].plot(log2_ceilings, [s.max_nodes for s in stats], 'o-',
                     color=color, label=name, linewidth=2, markersize=5)
        work = [s.max_queue_depth if name == 'iterative' else s.max_recursion
                for s in stats]
        axes[2].plot(log2_ceilings, work, 'o-', color=color, label=name,
                     linewidth=2, markersize=5)

    for ax, ylabel, title in [
            (axes[0], "% covered", "Coverage of [1, ceiling)"),
            (axes[1], "max nodes", "Tree size"),
            (axes[2], "max depth", "Recursion / stack / queue depth")]:
        ax.set_xlabel("log2 ceiling", fontsize=10)
        ax.set_ylabel(ylabel, fontsize=10)
        ax.set_title(title, fontsize=11)
        ax.legend(fontsize=8, facecolor='#222222', edgecolor='#444444',
                  labelcolor='#cccccc')
    axes[1].set_yscale('log')
    axes[2].set_yscale('log')

    if out is None:
        out = FIG_DIR / "strategy_sweep.png"
    return _save(fig, out), runs
