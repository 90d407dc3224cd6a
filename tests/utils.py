# tests/utils.py
"""
Small, reusable helpers used across the kmeans2d test suite.

Functions:
- as_partition(clusters): clusters as a set of frozensets (order-insensitive comparison).
- flatten(clusters): every point of every cluster, in order.
- same_multiset(a, b): whether two point sequences hold the same points with the same counts.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
- print_timing(label, seconds, **meta): convenience printer for timings (used by time_block).
"""

from __future__ import annotations

import json
import time
from collections import Counter
from contextlib import contextmanager
from typing import Any, Dict, Iterable, List, Sequence, Tuple


def as_partition(clusters: Iterable[Sequence]) -> frozenset:
    """Clusters as a set of frozensets of (x, y) tuples."""
    return frozenset(frozenset(tuple(p) for p in cluster) for cluster in clusters)


def flatten(clusters: Iterable[Sequence]) -> List[Tuple]:
    """All points of all clusters as tuples, cluster by cluster."""
    return [tuple(p) for cluster in clusters for p in cluster]


def same_multiset(a: Iterable[Sequence], b: Iterable[Sequence]) -> bool:
    """True if ``a`` and ``b`` contain the same points with the same multiplicities."""
    return Counter(tuple(p) for p in a) == Counter(tuple(p) for p in b)


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Example
    -------
    >>> with time_block("fit", {"n": 400, "K": 3}):
    ...     model.fit(X)

    Output
    ------
    [timing] fit {"n":400,"K":3} 0.123s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        print_timing(label, dt, **(meta or {}))


def print_timing(label: str, seconds: float, **meta: Any) -> None:
    """
    Print timing in a compact, machine-readable single line.

    Example:
    [timing] fit {"n":400,"K":3} 0.123s
    """
    meta_str = ""
    if meta:
        meta_str = " " + json.dumps(meta, separators=(",", ":"), default=repr)
    print(f"[timing] {label}{meta_str} {seconds:.3f}s")
