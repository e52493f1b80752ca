"""
ordtree Lookup Benchmark
========================
Times key lookups in an OrderedTree against the built-in alternatives:

  - dict           hash map
  - bisect         sorted list with binary search (ordered-set stand-in)
  - list           linear scan

Keys are uniformly random unsigned 32-bit integers. With order="sorted"
the keys are inserted in ascending order, which degrades the tree to a
linked list and shows the worst case.

Only the public tree surface (insert / contains) is used.
"""

import bisect
import random
import time
from dataclasses import dataclass
from typing import List, Optional

from ordtree.tree import OrderedTree


ORDERS = ("random", "sorted")
DEFAULT_SIZE = 10000
KEY_BITS = 32


class BenchmarkError(Exception):
    """A structure failed to find a key that was inserted into it."""


@dataclass
class BenchmarkResult:
    size: int
    order: str
    seed: Optional[int]
    tree_seconds: float
    dict_seconds: float
    bisect_seconds: float
    list_seconds: float

    @property
    def tree_beats_list(self) -> bool:
        return self.tree_seconds < self.list_seconds

    def summary_lines(self) -> List[str]:
        lines = [f"{self.size} keys, {self.order} insertion order"
                 + (f", seed {self.seed}" if self.seed is not None else "")]
        for label, seconds in (
            ("tree", self.tree_seconds),
            ("dict", self.dict_seconds),
            ("bisect", self.bisect_seconds),
            ("list", self.list_seconds),
        ):
            lines.append(f"  {label:<7} lookup took: {seconds * 1000:.3f} ms")
        verdict = "faster" if self.tree_beats_list else "NOT faster"
        lines.append(f"  tree is {verdict} than linear list scan")
        return lines


def random_keys(count: int, rng: random.Random) -> List[int]:
    """Draw count uniformly random unsigned 32-bit keys."""
    return [rng.getrandbits(KEY_BITS) for _ in range(count)]


def run_benchmark(size: int = DEFAULT_SIZE, seed: Optional[int] = None,
                  order: str = "random") -> BenchmarkResult:
    """
    Build every structure from the same keys, then time a lookup of
    each generated key in each of them.

    Raises:
        ValueError: size < 1 or unknown order
        BenchmarkError: a lookup missed a key that was inserted
    """
    if size < 1:
        raise ValueError(f"Benchmark size must be positive, got {size}")
    if order not in ORDERS:
        raise ValueError(f"Unknown insertion order '{order}' (expected one of {', '.join(ORDERS)})")

    rng = random.Random(seed)
    keys = random_keys(size, rng)
    if order == "sorted":
        keys.sort()

    tree = OrderedTree()
    table = {}
    for key in keys:
        tree.insert(key, None)
        table[key] = None
    ordered = sorted(table)
    linear = list(keys)

    def _time_lookups(label, found) -> float:
        start = time.perf_counter()
        for key in keys:
            if not found(key):
                raise BenchmarkError(f"{label} lookup missed inserted key {key}")
        return time.perf_counter() - start

    def _bisect_found(key) -> bool:
        i = bisect.bisect_left(ordered, key)
        return i < len(ordered) and ordered[i] == key

    return BenchmarkResult(
        size=size,
        order=order,
        seed=seed,
        tree_seconds=_time_lookups("tree", tree.contains),
        dict_seconds=_time_lookups("dict", table.__contains__),
        bisect_seconds=_time_lookups("bisect", _bisect_found),
        list_seconds=_time_lookups("list", linear.__contains__),
    )
