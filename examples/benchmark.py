"""
Time repeated parsing of the Sintel demo link.

Usage:
    python examples/benchmark.py [iterations]
"""

import sys
import timeit

from magnet_url import parse

from parse_example import SINTEL


def main():
    iterations = int(sys.argv[1]) if len(sys.argv) > 1 else 100000
    elapsed = timeit.timeit(lambda: parse(SINTEL), number=iterations)
    per_call = elapsed / iterations * 1e6
    print(f"{iterations} parses in {elapsed:.3f}s ({per_call:.2f} us/parse)")


if __name__ == "__main__":
    main()
