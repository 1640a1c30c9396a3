#!/usr/bin/env python3
"""
Performance benchmark for AVLTreeLib traversals and insertion.

Compares:
1. Recursive and iterative traversal variants on the same tree
2. Unbalanced and AVL insertion of random and sorted keys
3. avl_sort against the built-in sorted

Each measurement runs several iterations and reports the median.
"""

import gc
import random
import statistics
import sys
import time
from pathlib import Path
from typing import Callable, Dict

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from avltreelib import CountingVisitor, SearchTree, avl_sort, avl_tree, binary_search_tree


TRAVERSALS = [
    'pre_order_traversal',
    'pre_order_iter_traversal',
    'in_order_traversal',
    'in_order_iter_traversal',
    'post_order_traversal',
    'post_order_iter_traversal_two_stacks',
    'post_order_iter_traversal_one_stack',
    'breadth_first_traversal',
]


def median_time(func: Callable[[], object], iterations: int) -> float:
    """Run func repeatedly and return the median wall time in seconds."""
    times = []
    for _ in range(iterations):
        gc.collect()
        start = time.perf_counter()
        func()
        times.append(time.perf_counter() - start)
    return statistics.median(times)


def benchmark_traversals(tree: SearchTree, iterations: int) -> Dict[str, float]:
    results = {}
    for name in TRAVERSALS:
        method = getattr(tree, name)
        results[name] = median_time(lambda: method(CountingVisitor()), iterations)
    return results


def print_results(results: Dict[str, float]) -> None:
    sorted_results = sorted(results.items(), key=lambda x: x[1])
    fastest_time = sorted_results[0][1]

    print(f"{'Method':<40} {'Time (ms)':<12} {'Relative':<12} {'vs Fastest'}")
    print("-" * 80)
    for name, elapsed_s in sorted_results:
        relative = elapsed_s / fastest_time
        comparison = "FASTEST" if relative == 1.0 else f"{relative:.2f}x slower"
        print(f"{name:<40} {elapsed_s * 1000:<12.2f} {relative:<12.2f} {comparison}")


def run_comprehensive_benchmark(iterations: int = 5) -> None:
    print("\n" + "=" * 80)
    print("AVLTREELIB PERFORMANCE BENCHMARK")
    print("=" * 80)

    for count in (1000, 10000):
        keys = random.Random(count).sample(range(count * 10), count)

        print("\n" + "#" * 80)
        print(f"Tree of {count} random keys")
        print("#" * 80)

        tree = avl_tree(keys)
        print(f"AVL height: {tree.height()}")
        print("\nTraversals:")
        print_results(benchmark_traversals(tree, iterations))

        print("\nInsertion:")
        print_results({
            'unbalanced (random keys)': median_time(lambda: binary_search_tree(keys), iterations),
            'avl (random keys)': median_time(lambda: avl_tree(keys), iterations),
            'avl (sorted keys)': median_time(lambda: avl_tree(sorted(keys)), iterations),
        })

        print("\nSorting:")
        print_results({
            'avl_sort': median_time(lambda: avl_sort(keys), iterations),
            'sorted': median_time(lambda: sorted(keys), iterations),
        })

    print("\n" + "=" * 80)
    print("NOTES")
    print("=" * 80)
    print("""
- Recursive traversals are usually fastest but fail on trees deeper than
  the interpreter's recursion limit; unbalanced trees of sorted keys hit
  that quickly.
- AVL insertion recomputes subtree heights on the way up, so it is much
  slower per insert than unbalanced insertion of random keys.
""")


if __name__ == "__main__":
    run_comprehensive_benchmark()
