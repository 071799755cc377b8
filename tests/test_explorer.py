import sys
import warnings
import pytest
from collatz_coverage import (Explorer, ExplorationStats, Strategy,
                              WorkQueueOverflow, collatz_step, explore,
                              merge_ranges, predecessors, stays_below)

STRATEGIES = [s.value for s in Strategy]


def reference_closure(ceiling):
    """Plain set version of the reverse search, for cross-checking."""
    seen = {1, 2}
    todo = [4]
    while todo:
        v = todo.pop()
        if v >= ceiling or v in seen:
            continue
        seen.add(v)
        todo.append(2 * v)
        if (v - 1) % 6 == 3:
            todo.append((v - 1) // 3)
    return seen


# ----------------------------------------------------------
# Predecessor generation and forward reference
# ----------------------------------------------------------

@pytest.mark.parametrize("num, expected", [
    (4, [8, 1]),
    (16, [32, 5]),
    (10, [20, 3]),
    (7, [14]),
    (8, [16]),
    (19, [38]),     # 18 / 3 = 6 is even, so not a predecessor
])
def test_predecessors(num, expected):
    assert predecessors(num) == expected


def test_predecessors_invert_forward_step():
    for n in range(2, 3000):
        for p in predecessors(n):
            assert collatz_step(p) == n


def test_stays_below():
    assert stays_below(1, 2)
    assert stays_below(27, 9233)        # trajectory peaks at 9232
    assert not stays_below(27, 9232)
    assert not stays_below(3, 8)        # 3 -> 10


# ----------------------------------------------------------
# Scenarios
# ----------------------------------------------------------

@pytest.mark.parametrize("strategy", STRATEGIES)
def test_ceiling_1024(strategy):
    result = explore(1024, strategy)
    rs = result.range_set
    for n in (1, 2, 4, 8, 16, 5, 10, 20):
        assert rs.lookup(n), f"{n} should be covered"

    # exactly the values whose forward trajectory never leaves [1, 1024)
    for n in range(1, 1100):
        assert rs.lookup(n) == (n < 1024 and stays_below(n, 1024)), n
    assert not rs.lookup(27)
    rs.check_invariants()


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_ceiling_8_terminates_below_ceiling(strategy):
    result = explore(8, strategy)
    rs = result.range_set
    assert list(rs.traverse()) == [(1, 2), (4, 4)]
    assert not rs.lookup(8)
    assert not rs.lookup(16)
    assert result.stats.proven_last == 2


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_ceiling_9_includes_8(strategy):
    rs = explore(9, strategy).range_set
    assert rs.lookup(8)
    assert not rs.lookup(16)
    assert list(rs.traverse()) == [(1, 2), (4, 4), (8, 8)]


# ----------------------------------------------------------
# Strategy equivalence and aggregate coverage
# ----------------------------------------------------------

@pytest.mark.parametrize("ceiling", [3, 8, 9, 100, 1024, 5000])
def test_strategies_agree(ceiling):
    results = {s: explore(ceiling, s) for s in STRATEGIES}
    reference = merge_ranges((v, v) for v in reference_closure(ceiling))

    for name, result in results.items():
        assert list(result.range_set.traverse()) == reference, name
        result.range_set.check_invariants()
    proven = {r.stats.proven_last for r in results.values()}
    assert len(proven) == 1


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_covered_matches_reference_count(strategy):
    result = explore(1024, strategy)
    expected = reference_closure(1024)
    assert result.stats.covered == len(expected)
    assert result.stats.inserted == len(expected) - 2
    assert result.stats.candidates > result.stats.inserted


# ----------------------------------------------------------
# Statistics
# ----------------------------------------------------------

def test_recursive_stats():
    stats = explore(1024, 'recursive').stats
    assert isinstance(stats, ExplorationStats)
    assert stats.strategy == 'recursive'
    assert stats.ceiling == 1024
    assert stats.max_recursion > 10
    assert stats.max_queue_depth == 0
    assert stats.nodes >= 1
    assert stats.max_nodes >= stats.nodes
    assert 0 < stats.percent_covered <= 100
    assert "proven prefix: [1, " in stats.summary()
    assert stats.to_dict()['percent_covered'] == stats.percent_covered


def test_iterative_stats():
    stats = explore(1024, 'iterative').stats
    assert stats.max_queue_depth > 1
    assert stats.queue_depth == 0
    assert stats.dropped == 0
    assert "queue depth" in stats.summary()


def test_recursion_limit_restored():
    before = sys.getrecursionlimit()
    explore(4096, 'recursive')
    assert sys.getrecursionlimit() == before


def test_progress_callback():
    calls = []
    explorer = Explorer(1024, progress=lambda stats, final: calls.append((stats, final)),
                        progress_interval=16)
    result = explorer.run()
    assert calls[-1][1] is True
    assert all(not final for _, final in calls[:-1])
    assert len(calls) == result.stats.candidates // 16 + 1
    assert calls[-1][0] == result.stats


def test_trace_reaches_range_set():
    msgs = []
    explore(16, trace=msgs.append)
    assert any("creating [1, 2]" in m for m in msgs)


# ----------------------------------------------------------
# Work queue overflow policies
# ----------------------------------------------------------

def test_drop_policy_loses_work_and_warns():
    full = explore(4096, 'recursive').stats.covered
    with pytest.warns(UserWarning, match="dropped"):
        result = explore(4096, 'iterative', queue_capacity=2, overflow='drop')
    assert result.stats.dropped > 0
    assert result.stats.covered < full
    result.range_set.check_invariants()


def test_fail_policy_raises():
    with pytest.raises(WorkQueueOverflow):
        explore(4096, 'iterative', queue_capacity=2, overflow='fail')


def test_grow_policy_matches_recursive():
    explorer = Explorer(4096, 'iterative', queue_capacity=2, overflow='grow')
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = explorer.run()
    assert explorer.queue.capacity > 2
    assert result.stats.dropped == 0
    expected = explore(4096, 'recursive').range_set
    assert list(result.range_set.traverse()) == list(expected.traverse())


# ----------------------------------------------------------
# Validation
# ----------------------------------------------------------

@pytest.mark.parametrize("kwargs", [
    dict(ceiling=2),
    dict(ceiling=0),
    dict(ceiling=100, strategy='bogus'),
    dict(ceiling=100, overflow='bogus'),
    dict(ceiling=(1 << 63) + 1, strategy='iterative'),
    dict(ceiling=100, progress_interval=0),
])
def test_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        Explorer(**kwargs)


def test_run_only_once():
    explorer = Explorer(64)
    explorer.run()
    with pytest.raises(RuntimeError):
        explorer.run()


def test_independent_runs_do_not_share_state():
    a = explore(1024, 'stack')
    b = explore(64, 'stack')
    assert a.stats.covered > b.stats.covered
    assert explore(1024, 'stack').stats == a.stats
