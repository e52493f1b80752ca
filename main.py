"""
ordtree — Lookup Benchmark
==========================
Entry point for the OrderedTree lookup benchmark.

Usage:
    python main.py [options]

Options:
    --help              Show help
    --size N            Number of random keys (default: 10000)
    --seed S            Seed for the key generator (default: random)
    --order ORDER       Insertion order: random or sorted (default: random)
"""

import sys


def print_help():
    print("""
ordtree — Lookup Benchmark

Usage:
    python main.py                                Benchmark 10000 random keys
    python main.py --size 50000 --seed 7          Larger, reproducible run
    python main.py --order sorted --size 2000     Worst case (skewed tree)

Options:
    --help          Show this help
    --size N        Number of random 32-bit keys (default: 10000)
    --seed S        Integer seed for the key generator
    --order ORDER   Insertion order: random | sorted (default: random)
""")


def _parse_int(option: str, text: str) -> int:
    try:
        return int(text)
    except ValueError:
        print(f"Error: {option} expects an integer, got '{text}'", file=sys.stderr)
        sys.exit(1)


def main() -> None:
    """Parse CLI arguments and run the benchmark."""
    from ordtree.bench import BenchmarkError, DEFAULT_SIZE, run_benchmark

    args = sys.argv[1:]

    if "--help" in args or "-h" in args:
        print_help()
        return

    size = DEFAULT_SIZE
    seed = None
    order = "random"

    i = 0
    while i < len(args):
        if args[i] == "--size" and i + 1 < len(args):
            size = _parse_int("--size", args[i + 1])
            i += 2
        elif args[i] == "--seed" and i + 1 < len(args):
            seed = _parse_int("--seed", args[i + 1])
            i += 2
        elif args[i] == "--order" and i + 1 < len(args):
            order = args[i + 1]
            i += 2
        else:
            print(f"Unknown option: {args[i]}", file=sys.stderr)
            print_help()
            sys.exit(1)

    try:
        result = run_benchmark(size=size, seed=seed, order=order)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except BenchmarkError as e:
        print(f"Benchmark failed: {e}", file=sys.stderr)
        sys.exit(1)

    for line in result.summary_lines():
        print(line)


if __name__ == "__main__":
    main()
