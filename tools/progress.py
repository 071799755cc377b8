"""
Progress and timing output for long exploration runs.

ProgressLine is the callable an Explorer takes as `progress=`. It keeps
rewriting one status line on stderr while the run is going and ends it with
a newline when the run finishes. It stays silent unless the stream is a
terminal, so redirected output is left clean.

Usage:
    from tools.progress import ProgressLine, Timer

    with Timer("done"):
        explore(1 << 24, progress=ProgressLine())
"""

import sys
import time

LINE_WIDTH = 70


class ProgressLine:
    """Status line: "pct% [1, proven] (n nodes d depth r|q work)"."""

    def __init__(self, stream=None, enabled=None):
        self.stream = stream if stream is not None else sys.stderr
        if enabled is None:
            isatty = getattr(self.stream, 'isatty', None)
            enabled = bool(isatty is not None and isatty())
        self.enabled = enabled
        self.updates = 0

    @staticmethod
    def format(stats):
        # queue runs report the live queue depth, the others peak recursion
        if stats.strategy == 'iterative':
            tag, work = 'q', stats.queue_depth
        else:
            tag, work = 'r', stats.max_recursion
        return (f"{stats.percent_covered:3d}% [1, {stats.proven_last}] "
                f"(n {stats.nodes:9d} d {stats.max_depth:9d} {tag} {work:9d})")

    def __call__(self, stats, final=False):
        if not self.enabled:
            return
        line = self.format(stats).ljust(LINE_WIDTH)
        self.stream.write(line + ("\n" if final else "\r"))
        self.stream.flush()
        self.updates += 1


class Timer:
    """Context manager that reports "<label> in X.XXX s" on exit."""

    def __init__(self, label="done", stream=None, enabled=True):
        self.label = label
        self.stream = stream
        self.enabled = enabled
        self.elapsed = None

    def __enter__(self):
        self.t0 = time.time()
        return self

    def __exit__(self, exc_type, *args):
        self.elapsed = time.time() - self.t0
        if self.enabled and exc_type is None:
            print(f"{self.label} in {self.elapsed:.3f} s",
                  file=self.stream if self.stream is not None else sys.stderr)
