"""
Collatz Coverage: reverse-reachability proofs over a bounded integer universe

Runs the Collatz relation backwards from the base case {1, 2} and records
every value it reaches in a RangeSet, a binary interval tree that merges
ranges as they fill in. The leaf anchored at 1 is a proven prefix [1, N]:
every integer in it reaches 1 without a single step climbing to the ceiling.

COMPONENTS:

  Coverage:
    - RangeSet: interval tree of proven ranges (insert / lookup / traverse)
    - RangeNode: one span of the tree, either a leaf or an internal node

  Work store:
    - WorkQueue: fixed-capacity ring buffer over numpy uint64 storage, with
      an explicit OverflowPolicy (drop / fail / grow)

  Exploration:
    - Explorer: predecessor generation with one of three strategies
        RECURSIVE  native recursion, depth-first
        STACK      explicit LIFO, same visiting order as RECURSIVE
        ITERATIVE  WorkQueue, breadth-first
    - explore(): run to completion, returns ExplorationResult

FORWARD REFERENCE:
    - collatz_step(n), stays_below(n, ceiling): forward simulation, used to
      cross-check what the reverse search proves

Usage:
    from collatz_coverage import explore, RangeSet

    result = explore(1 << 20)
    print(result.stats.summary())
    27 in result.range_set

    # Work-queue strategy, growing the queue instead of dropping work
    result = explore(1 << 20, strategy='iterative', overflow='grow')

    # Just the tree
    rs = RangeSet()
    rs.insert(1, 2)
    rs.insert(4)
    list(rs.traverse())          # [(1, 2), (4, 4)]
"""

import sys
import warnings
from contextlib import contextmanager
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np


DEFAULT_CEILING = 1 << 30
WORKQUEUE_SIZE = 1 << 20
PROGRESS_INTERVAL = 1 << 10
MAX_NATIVE_RECURSION = 1 << 15

BASE_RANGE = (1, 2)
FIRST_CANDIDATE = 4

_UINT64_MAX = (1 << 64) - 1

Trace = Optional[Callable[[str], None]]


# =============================================================================
# FORWARD COLLATZ
# =============================================================================

def collatz_step(num: int) -> int:
    """Single forward step: n/2 for even n, 3n+1 for odd n."""
    if num % 2 == 0:
        return num // 2
    return 3 * num + 1


def stays_below(num: int, ceiling: int) -> bool:
    """True if num reaches 1 without any value on the way being >= ceiling."""
    while num != 1:
        if num >= ceiling:
            return False
        num = collatz_step(num)
    return True


def predecessors(num: int) -> List[int]:
    """Reverse Collatz step: the values whose forward step lands on num.

    2n always halves back to n. (n - 1) / 3 reaches n through 3x+1 only when
    it is an odd integer, which is exactly n - 1 = 3 (mod 6); for
    n - 1 = 0 (mod 6) the quotient is even and would have been halved.
    """
    if (num - 1) % 6 == 3:
        return [num * 2, (num - 1) // 3]
    return [num * 2]


def merge_ranges(ranges: Iterable[Tuple[int, int]]) -> List[Tuple[int, int]]:
    """Sort inclusive ranges and join any that overlap or touch."""
    merged: List[Tuple[int, int]] = []
    for first, last in sorted(ranges):
        if merged and first <= merged[-1][1] + 1:
            if last > merged[-1][1]:
                merged[-1] = (merged[-1][0], last)
        else:
            merged.append((first, last))
    return merged


# =============================================================================
# COVERAGE TREE
# =============================================================================

class RangeNode:
    """One span of the coverage tree.

    A leaf is a contiguous run of proven integers. An internal node spans
    both of its children and the gap between them, so its `covered` count
    is smaller than its span.
    """

    __slots__ = ('first', 'last', 'covered', 'depth', 'height', 'left', 'right')

    def __init__(self, depth: int, first: int, last: int):
        self.first = first
        self.last = last
        self.covered = last - first + 1
        self.depth = depth
        self.height = 0
        self.left: Optional['RangeNode'] = None
        self.right: Optional['RangeNode'] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def refresh(self):
        """Recompute bounds, coverage and subtree height from the children."""
        if self.is_leaf:
            self.covered = self.last - self.first + 1
            self.height = 0
        else:
            self.first = self.left.first
            self.last = self.right.last
            self.covered = self.left.covered + self.right.covered
            self.height = 1 + max(self.left.height, self.right.height)

    def __repr__(self):
        kind = "leaf" if self.is_leaf else "internal"
        return (f"RangeNode({kind} [{self.first}, {self.last}] "
                f"covered={self.covered} depth={self.depth})")


def _check(condition: bool, node: RangeNode, message: str):
    if not condition:
        raise AssertionError(f"{message}: {node!r}")


class RangeSet:
    """
    Interval tree of proven integer ranges.

    Ranges are inserted with insert(first, last). Touching or overlapping
    ranges collapse into a single leaf, and disjoint ranges split a leaf into
    two ordered children. The tree keeps running statistics that a progress
    display can read in O(1): covered, span, proven_last, nodes, max_depth.

    `proven` is a non-owning reference to the leaf whose span starts at 1.
    Its `last` is the highest value proven to chain back to the base case
    through an unbroken prefix.
    """

    def __init__(self, trace: Trace = None):
        self.root: Optional[RangeNode] = None
        self.proven: Optional[RangeNode] = None
        self.nodes = 0
        self.max_nodes = 0
        self.max_depth = 0
        self._trace = trace

    def _debug(self, depth: int, fmt: str, *args):
        if self._trace is not None:
            self._trace(("%6d " + fmt) % ((depth,) + args))

    # ----------------------------------------------------------
    # Node lifecycle
    # ----------------------------------------------------------
    def _create(self, depth: int, first: int, last: int) -> RangeNode:
        self._debug(depth, "creating [%d, %d]", first, last)
        node = RangeNode(depth, first, last)
        if depth > self.max_depth:
            self.max_depth = depth
        self.nodes += 1
        if self.nodes > self.max_nodes:
            self.max_nodes = self.nodes
        if first == 1:
            self.proven = node
        return node

    def _destroy(self, node: RangeNode):
        stack = [node]
        while stack:
            n = stack.pop()
            if not n.is_leaf:
                stack.append(n.right)
                stack.append(n.left)
            self._debug(n.depth, "destroying [%d, %d]", n.first, n.last)
            self.nodes -= 1

    def _build(self, node: RangeNode, ranges: List[Tuple[int, int]]):
        """Shape node into a balanced subtree over sorted disjoint ranges."""
        if len(ranges) == 1:
            node.first, node.last = ranges[0]
            node.left = node.right = None
            node.refresh()
            if node.first == 1:
                self.proven = node
            return
        mid = len(ranges) // 2
        depth = node.depth + 1
        node.left = self._create(depth, ranges[0][0], ranges[mid - 1][1])
        node.right = self._create(depth, ranges[mid][0], ranges[-1][1])
        self._build(node.left, ranges[:mid])
        self._build(node.right, ranges[mid:])
        node.refresh()

    # ----------------------------------------------------------
    # Insertion
    # ----------------------------------------------------------
    def insert(self, first: int, last: Optional[int] = None) -> bool:
        """Record [first, last] (a single point when last is omitted).

        Returns True if the whole range was already covered, in which case
        the tree is left untouched.
        """
        if last is None:
            last = first
        if first < 1 or first > last:
            raise ValueError(
                f"Invalid range [{first}, {last}]: need 1 <= first <= last")

        if self.root is None:
            self.root = self._create(0, first, last)
            return False

        path = []
        node = self.root
        while True:
            found, child = self._step(node, first, last)
            if found:
                self._debug(node.depth, "found [%d, %d] in [%d, %d]",
                            first, last, node.first, node.last)
                return True
            path.append(node)
            if child is None:
                break
            node = child

        for n in reversed(path):
            n.refresh()
        return False

    def _step(self, node: RangeNode, first: int,
              last: int) -> Tuple[bool, Optional[RangeNode]]:
        """Handle [first, last] at one node.

        Returns (True, None) if already covered, (False, None) once the node
        has absorbed the range, or (False, child) to continue the descent.
        """
        assert (node.left is None) == (node.right is None), node
        assert node.left is None or node.first == node.left.first, node
        assert node.right is None or node.last == node.right.last, node

        if first == last and (first == node.first or last == node.last):
            return True, None
        if node.is_leaf and first == node.first and last == node.last:
            return True, None

        self._debug(node.depth, "inserting [%d, %d] into [%d, %d]",
                    first, last, node.first, node.last)
        if node.is_leaf:
            return self._insert_into_leaf(node, first, last), None
        return False, self._insert_into_internal(node, first, last)

    def _insert_into_leaf(self, node: RangeNode, first: int, last: int) -> bool:
        # cases where we remain a leaf
        if first >= node.first and last <= node.last:
            return True
        if first <= node.last + 1 and last >= node.first - 1:
            new_first, new_last = min(first, node.first), max(last, node.last)
            self._debug(node.depth, "expanding [%d, %d] to [%d, %d]",
                        node.first, node.last, new_first, new_last)
            node.first, node.last = new_first, new_last
            node.covered = new_last - new_first + 1
            if new_first == 1:
                self.proven = node
            return False

        # cases where we split into child leaves
        depth = node.depth + 1
        if last < node.first - 1:
            self._debug(node.depth, "splitting into [%d, %d] and [%d, %d]",
                        first, last, node.first, node.last)
            node.left = self._create(depth, first, last)
            node.right = self._create(depth, node.first, node.last)
        elif first > node.last + 1:
            self._debug(node.depth, "splitting into [%d, %d] and [%d, %d]",
                        node.first, node.last, first, last)
            node.left = self._create(depth, node.first, node.last)
            node.right = self._create(depth, first, last)
        else:
            raise AssertionError(
                f"[{first}, {last}] neither joins nor clears {node!r}")
        node.refresh()
        return False

    def _insert_into_internal(self, node: RangeNode, first: int,
                              last: int) -> Optional[RangeNode]:
        left, right = node.left, node.right

        # bridges the gap: the children's spans become contiguous
        if first <= left.last + 1 and last >= right.first - 1:
            self._coalesce(node, first, last)
            return None

        if first > left.last + 1 and last < right.first - 1:
            # strictly between the children, grow the shorter subtree
            return left if left.height < right.height else right
        if last < right.first - 1:
            return left
        if first > left.last + 1:
            return right
        raise AssertionError(
            f"[{first}, {last}] has no place under {node!r}")

    def _coalesce(self, node: RangeNode, first: int, last: int):
        ranges = merge_ranges(list(self._leaf_ranges(node)) + [(first, last)])
        self._debug(node.depth, "coalescing [%d, %d] [%d, %d] into [%d, %d]",
                    node.left.first, node.left.last,
                    node.right.first, node.right.last,
                    ranges[0][0], ranges[-1][1])
        self._destroy(node.left)
        self._destroy(node.right)
        node.left = node.right = None
        # Two leaf children always merge into one range. An internal child
        # keeps its own gaps, so the subtree is rebuilt rather than flattened.
        self._build(node, ranges)

    # ----------------------------------------------------------
    # Queries
    # ----------------------------------------------------------
    def lookup(self, num: int) -> bool:
        """True if num lies in a recorded range."""
        node = self.root
        while node is not None:
            if node.is_leaf:
                return node.first <= num <= node.last
            if node.left.first <= num <= node.left.last:
                node = node.left
            elif node.right.first <= num <= node.right.last:
                node = node.right
            else:
                return False
        return False

    def __contains__(self, num: int) -> bool:
        return self.lookup(num)

    @staticmethod
    def _leaf_ranges(node: RangeNode) -> Iterator[Tuple[int, int]]:
        stack = [node]
        while stack:
            n = stack.pop()
            if n.is_leaf:
                yield n.first, n.last
            else:
                stack.append(n.right)
                stack.append(n.left)

    def traverse(self) -> Iterator[Tuple[int, int]]:
        """Yield the covered ranges as (first, last) in ascending order."""
        if self.root is not None:
            yield from self._leaf_ranges(self.root)

    def __iter__(self):
        return self.traverse()

    def format_ranges(self) -> str:
        """One "[first, last]" line per covered range."""
        return "\n".join(f"[{first}, {last}]" for first, last in self.traverse())

    # ----------------------------------------------------------
    # Statistics
    # ----------------------------------------------------------
    @property
    def covered(self) -> int:
        return self.root.covered if self.root is not None else 0

    @property
    def span(self) -> int:
        if self.root is None:
            return 0
        return self.root.last - self.root.first + 1

    @property
    def percent_covered(self) -> int:
        span = self.span
        return self.covered * 100 // span if span else 0

    @property
    def proven_last(self) -> int:
        return self.proven.last if self.proven is not None else 0

    def check_invariants(self):
        """Walk the whole tree, raising AssertionError at the first violation."""
        if self.root is None:
            if self.nodes != 0 or self.proven is not None:
                raise AssertionError(
                    f"empty tree with nodes={self.nodes} proven={self.proven!r}")
            return

        count = 0
        leaves = []
        stack = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            count += 1
            _check(node.depth == depth, node, f"depth should be {depth}")
            _check((node.left is None) == (node.right is None), node,
                   "exactly one child")
            if node.is_leaf:
                _check(node.first <= node.last, node, "inverted bounds")
                _check(node.covered == node.last - node.first + 1, node,
                       "leaf coverage differs from its span")
                _check(node.height == 0, node, "leaf with non-zero height")
                leaves.append(node)
                continue
            left, right = node.left, node.right
            _check(node.first == left.first, node, "first differs from left child")
            _check(node.last == right.last, node, "last differs from right child")
            _check(node.covered == left.covered + right.covered, node,
                   "coverage is not the sum of the children")
            _check(left.last + 1 < right.first, node,
                   "children overlap or touch")
            _check(node.height == 1 + max(left.height, right.height), node,
                   "stale height")
            stack.append((right, depth + 1))
            stack.append((left, depth + 1))

        if count != self.nodes:
            raise AssertionError(f"node count {self.nodes}, tree holds {count}")
        anchor = leaves[0] if leaves[0].first == 1 else None
        if self.proven is not anchor:
            raise AssertionError(
                f"proven is {self.proven!r}, expected {anchor!r}")

    def __repr__(self):
        return (f"RangeSet(covered={self.covered}, span={self.span}, "
                f"nodes={self.nodes}, proven_last={self.proven_last})")


# =============================================================================
# WORK QUEUE
# =============================================================================

class OverflowPolicy(Enum):
    """What WorkQueue.append does when the buffer is full."""
    DROP = "drop"       # refuse the item, return False (lost work)
    FAIL = "fail"       # raise WorkQueueOverflow
    GROW = "grow"       # double the capacity and keep going


class WorkQueueOverflow(RuntimeError):
    """Raised by a FAIL-policy WorkQueue that has no room left."""


class WorkQueue:
    """
    Fixed-capacity FIFO ring buffer of positive integers.

    Slots hold EMPTY (0) when free. That is what tells a full buffer from an
    empty one when both cursors meet, so EMPTY can never be queued. The
    exploration never produces a candidate below 1, let alone 0.
    """

    EMPTY = 0

    def __init__(self, capacity: int = WORKQUEUE_SIZE, overflow='drop'):
        if capacity < 1 or capacity & (capacity - 1):
            raise ValueError(f"capacity must be a power of two, got {capacity}")
        self.capacity = capacity
        self.overflow = OverflowPolicy(overflow)
        self._buf = np.zeros(capacity, dtype=np.uint64)
        self._read = 0
        self._write = 0
        self.dropped = 0
        self.max_depth = 0

    def __len__(self) -> int:
        if self._read == self._write:
            return self.capacity if self._buf[self._read] != self.EMPTY else 0
        return (self._write - self._read) % self.capacity

    @property
    def full(self) -> bool:
        return self._write == self._read and self._buf[self._write] != self.EMPTY

    def append(self, num: int) -> bool:
        """Queue num. Returns False if it was dropped on overflow."""
        if not 0 < num <= _UINT64_MAX:
            raise ValueError(f"cannot queue {num}: items must be in [1, 2**64)")
        if self.full:
            if self.overflow is OverflowPolicy.DROP:
                self.dropped += 1
                return False
            if self.overflow is OverflowPolicy.FAIL:
                raise WorkQueueOverflow(
                    f"work queue full ({self.capacity} entries) at {num}")
            self._grow()
        self._buf[self._write] = num
        self._write = (self._write + 1) % self.capacity
        depth = len(self)
        if depth > self.max_depth:
            self.max_depth = depth
        return True

    def fetch(self) -> int:
        """Pop the oldest entry, or EMPTY if nothing is pending."""
        if self._read == self._write and self._buf[self._read] == self.EMPTY:
            return self.EMPTY
        num = int(self._buf[self._read])
        self._buf[self._read] = self.EMPTY
        self._read = (self._read + 1) % self.capacity
        return num

    def _grow(self):
        # only called when full, so every slot is pending
        pending = np.concatenate((self._buf[self._read:], self._buf[:self._read]))
        self._buf = np.zeros(self.capacity * 2, dtype=np.uint64)
        self._buf[:self.capacity] = pending
        self._read = 0
        self._write = self.capacity
        self.capacity *= 2

    def __repr__(self):
        return (f"WorkQueue({len(self)}/{self.capacity}, "
                f"overflow={self.overflow.value}, dropped={self.dropped})")


# =============================================================================
# EXPLORATION
# =============================================================================

class Strategy(Enum):
    RECURSIVE = "recursive"
    STACK = "stack"
    ITERATIVE = "iterative"


@dataclass
class ExplorationStats:
    """Counters of one exploration run, as read by progress and summaries."""
    ceiling: int
    strategy: str
    covered: int = 0
    span: int = 0
    proven_last: int = 0
    nodes: int = 0
    max_nodes: int = 0
    max_depth: int = 0
    max_recursion: int = 0
    queue_depth: int = 0
    max_queue_depth: int = 0
    candidates: int = 0
    inserted: int = 0
    dropped: int = 0

    @property
    def percent_covered(self) -> int:
        return self.covered * 100 // self.span if self.span else 0

    def summary(self) -> str:
        lines = ["=" * 60,
                 f"COLLATZ COVERAGE ({self.strategy}, ceiling {self.ceiling})",
                 "=" * 60,
                 f"  covered:       {self.covered} of {self.span} "
                 f"({self.percent_covered}%)",
                 f"  proven prefix: [1, {self.proven_last}]",
                 f"  nodes:         {self.nodes} (max {self.max_nodes}), "
                 f"tree depth {self.max_depth}"]
        if self.strategy == Strategy.ITERATIVE.value:
            lines.append(f"  queue depth:   max {self.max_queue_depth}")
        else:
            lines.append(f"  recursion:     max {self.max_recursion}")
        lines.append(f"  candidates:    {self.candidates} "
                     f"(inserted {self.inserted}, dropped {self.dropped})")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, int]:
        out = asdict(self)
        out['percent_covered'] = self.percent_covered
        return out


@dataclass
class ExplorationResult:
    range_set: RangeSet
    stats: ExplorationStats


@contextmanager
def _recursion_headroom(ceiling: int):
    """Temporarily allow native recursion as deep as the ceiling can force.

    Every live frame but the newest recorded a distinct value below the
    ceiling, so the extra depth needed never exceeds the ceiling itself.
    """
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(previous + min(ceiling, MAX_NATIVE_RECURSION))
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Explorer:
    """
    Reverse Collatz search below an exclusive ceiling.

    Seeds the RangeSet with [1, 2] and explores from 4. Each new value v
    spawns 2v and, when (v - 1) % 6 == 3, (v - 1) / 3. Candidates at or above
    the ceiling are discarded. Candidates already covered prune their whole
    branch.

    All three strategies reach the same final RangeSet unless the
    iterative WorkQueue drops work under OverflowPolicy.DROP.

    Parameters
    ----------
    ceiling : int
        Exclusive upper bound on explored values (must exceed 2).
    strategy : Strategy or str
        'recursive' (default), 'stack' or 'iterative'.
    queue_capacity : int
        Initial WorkQueue capacity for 'iterative' (power of two).
    overflow : OverflowPolicy or str
        WorkQueue overflow policy for 'iterative'.
    progress : callable(ExplorationStats, final: bool), optional
        Called every `progress_interval` candidates and once at the end.
    trace : callable(str), optional
        Receives RangeSet debug lines.
    """

    def __init__(self, ceiling: int = DEFAULT_CEILING, strategy='recursive',
                 queue_capacity: int = WORKQUEUE_SIZE, overflow='drop',
                 progress: Optional[Callable[[ExplorationStats, bool], None]] = None,
                 progress_interval: int = PROGRESS_INTERVAL,
                 trace: Trace = None):
        self.strategy = Strategy(strategy)
        self.overflow = OverflowPolicy(overflow)
        if ceiling <= BASE_RANGE[1]:
            raise ValueError(f"ceiling must exceed {BASE_RANGE[1]}, got {ceiling}")
        if self.strategy is Strategy.ITERATIVE and ceiling > 1 << 63:
            raise ValueError("iterative exploration is limited to ceilings <= 2**63")
        if progress_interval < 1:
            raise ValueError(f"progress_interval must be >= 1, got {progress_interval}")
        self.ceiling = ceiling
        self.queue_capacity = queue_capacity
        self.progress = progress
        self.progress_interval = progress_interval

        self.range_set = RangeSet(trace=trace)
        self.queue: Optional[WorkQueue] = None
        self.candidates = 0
        self.inserted = 0
        self.max_recursion = 0
        self._depth = 0
        self._countdown = progress_interval

    def run(self) -> ExplorationResult:
        """Explore until the work runs out."""
        if self.range_set.root is not None:
            raise RuntimeError("Explorer.run() can only be called once")
        self.range_set.insert(*BASE_RANGE)

        if self.strategy is Strategy.RECURSIVE:
            with _recursion_headroom(self.ceiling):
                self._explore_recursive(FIRST_CANDIDATE)
        elif self.strategy is Strategy.STACK:
            self._explore_stack()
        else:
            self._explore_iterative()

        stats = self.snapshot()
        if self.progress is not None:
            self.progress(stats, True)
        if stats.dropped:
            warnings.warn(
                f"Work queue dropped {stats.dropped} candidates; coverage below "
                f"{self.ceiling} is incomplete. Raise queue_capacity or use "
                f"overflow='grow'.")
        return ExplorationResult(self.range_set, stats)

    def snapshot(self) -> ExplorationStats:
        rs = self.range_set
        queue = self.queue
        return ExplorationStats(
            ceiling=self.ceiling,
            strategy=self.strategy.value,
            covered=rs.covered,
            span=rs.span,
            proven_last=rs.proven_last,
            nodes=rs.nodes,
            max_nodes=rs.max_nodes,
            max_depth=rs.max_depth,
            max_recursion=self.max_recursion,
            queue_depth=len(queue) if queue is not None else 0,
            max_queue_depth=queue.max_depth if queue is not None else 0,
            candidates=self.candidates,
            inserted=self.inserted,
            dropped=queue.dropped if queue is not None else 0,
        )

    def _tick(self):
        self.candidates += 1
        if self.progress is not None:
            self._countdown -= 1
            if self._countdown == 0:
                self._countdown = self.progress_interval
                self.progress(self.snapshot(), False)

    def _record(self, num: int) -> bool:
        found = self.range_set.insert(num)
        if not found:
            self.inserted += 1
        return found

    def _explore_recursive(self, num: int):
        self._depth += 1
        if self._depth > self.max_recursion:
            self.max_recursion = self._depth
        try:
            self._tick()
            if num >= self.ceiling or self._record(num):
                return
            for pred in predecessors(num):
                self._explore_recursive(pred)
        finally:
            self._depth -= 1

    def _explore_stack(self):
        # predecessors go on in reverse so 2v is popped first, as in recursion
        stack = [FIRST_CANDIDATE]
        while stack:
            if len(stack) > self.max_recursion:
                self.max_recursion = len(stack)
            num = stack.pop()
            self._tick()
            if num >= self.ceiling or self._record(num):
                continue
            stack.extend(reversed(predecessors(num)))

    def _explore_iterative(self):
        queue = self.queue = WorkQueue(self.queue_capacity, self.overflow)
        queue.append(FIRST_CANDIDATE)
        while True:
            num = queue.fetch()
            if num == WorkQueue.EMPTY:
                break
            self._tick()
            if num >= self.ceiling or self._record(num):
                continue
            for pred in predecessors(num):
                queue.append(pred)


def explore(ceiling: int = DEFAULT_CEILING, strategy='recursive',
            **options) -> ExplorationResult:
    """Run a complete exploration. Options are passed on to Explorer."""
    return Explorer(ceiling, strategy, **options).run()
