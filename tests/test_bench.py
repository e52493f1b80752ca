"""
ordtree Benchmark Tests
=======================
Tests for the lookup benchmark harness and the main.py CLI, including the
performance property: tree lookups beat a linear list scan at N = 10,000.
"""

import os
import random
import sys

import pytest

# Ensure project root is on path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main
from ordtree.bench import BenchmarkResult, random_keys, run_benchmark
from ordtree.tree import OrderedTree


# ═══════════════════════════════════════════════════════════════════
# Harness
# ═══════════════════════════════════════════════════════════════════

class TestRandomKeys:

    def test_count_and_range(self):
        keys = random_keys(500, random.Random(1))
        assert len(keys) == 500
        assert all(0 <= k < 2**32 for k in keys)

    def test_seeded_is_reproducible(self):
        assert random_keys(50, random.Random(9)) == random_keys(50, random.Random(9))


class TestRunBenchmark:

    def test_small_run(self):
        result = run_benchmark(size=200, seed=3)
        assert isinstance(result, BenchmarkResult)
        assert result.size == 200
        assert result.order == "random"
        assert result.seed == 3
        for seconds in (result.tree_seconds, result.dict_seconds,
                        result.bisect_seconds, result.list_seconds):
            assert seconds >= 0

    def test_sorted_order(self):
        result = run_benchmark(size=300, seed=5, order="sorted")
        assert result.order == "sorted"

    def test_rejects_bad_size(self):
        with pytest.raises(ValueError, match="positive"):
            run_benchmark(size=0)

    def test_rejects_bad_order(self):
        with pytest.raises(ValueError, match="order"):
            run_benchmark(size=10, order="reverse")

    def test_summary_lines(self):
        result = BenchmarkResult(size=10, order="random", seed=1,
                                 tree_seconds=0.001, dict_seconds=0.0005,
                                 bisect_seconds=0.0008, list_seconds=0.01)
        lines = result.summary_lines()
        assert lines[0] == "10 keys, random insertion order, seed 1"
        assert any(line.strip().startswith("tree") for line in lines)
        assert lines[-1].strip() == "tree is faster than linear list scan"

    def test_summary_without_seed(self):
        result = BenchmarkResult(size=10, order="sorted", seed=None,
                                 tree_seconds=0.02, dict_seconds=0.0,
                                 bisect_seconds=0.0, list_seconds=0.01)
        lines = result.summary_lines()
        assert lines[0] == "10 keys, sorted insertion order"
        assert not result.tree_beats_list
        assert "NOT faster" in lines[-1]


# ═══════════════════════════════════════════════════════════════════
# Performance Property
# ═══════════════════════════════════════════════════════════════════

class TestPerformance:

    def test_tree_beats_linear_scan(self):
        result = run_benchmark(size=10000, seed=42)
        assert result.tree_beats_list

    def test_direct_lookup_comparison(self):
        """Tree lookups of a key sample beat scanning the full list."""
        import time

        rng = random.Random(7)
        keys = random_keys(10000, rng)
        tree = OrderedTree()
        for k in keys:
            tree.insert(k, None)
        probes = rng.sample(keys, 1000)

        start = time.perf_counter()
        assert all(tree.contains(k) for k in probes)
        tree_time = time.perf_counter() - start

        start = time.perf_counter()
        assert all(k in keys for k in probes)
        list_time = time.perf_counter() - start

        assert tree_time < list_time


# ═══════════════════════════════════════════════════════════════════
# CLI
# ═══════════════════════════════════════════════════════════════════

class TestCLI:

    def _run(self, monkeypatch, *args):
        monkeypatch.setattr(sys, "argv", ["main.py", *args])
        main.main()

    def test_help(self, monkeypatch, capsys):
        self._run(monkeypatch, "--help")
        assert "Usage" in capsys.readouterr().out

    def test_run(self, monkeypatch, capsys):
        self._run(monkeypatch, "--size", "100", "--seed", "1")
        out = capsys.readouterr().out
        assert out.startswith("100 keys, random insertion order, seed 1")
        assert "list    lookup took" in out

    def test_sorted(self, monkeypatch, capsys):
        self._run(monkeypatch, "--size", "50", "--order", "sorted")
        assert "sorted insertion order" in capsys.readouterr().out

    def test_unknown_option(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            self._run(monkeypatch, "--bogus")
        assert exc.value.code == 1
        assert "Unknown option" in capsys.readouterr().err

    def test_bad_integer(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            self._run(monkeypatch, "--size", "many")
        assert exc.value.code == 1
        assert "expects an integer" in capsys.readouterr().err

    def test_invalid_size(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            self._run(monkeypatch, "--size", "0")
        assert exc.value.code == 1
        assert "positive" in capsys.readouterr().err

    def test_invalid_order(self, monkeypatch, capsys):
        with pytest.raises(SystemExit):
            self._run(monkeypatch, "--order", "shuffled")
        assert "Unknown insertion order" in capsys.readouterr().err
