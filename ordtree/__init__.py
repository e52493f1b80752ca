"""
ordtree
=======
Minimal ordered key-value container backed by an unbalanced binary
search tree.

Components:
  - tree: OrderedTree with insert, contains, get (iterative descent)
  - bench: lookup benchmark against dict, bisect and linear list scan

Usage:
    from ordtree import OrderedTree
"""

from ordtree.tree import Node, OrderedTree
from ordtree.bench import BenchmarkError, BenchmarkResult, random_keys, run_benchmark

__all__ = [
    "Node", "OrderedTree",
    "BenchmarkError", "BenchmarkResult", "random_keys", "run_benchmark",
]
