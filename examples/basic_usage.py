#!/usr/bin/env python3
"""
Basic usage example for AVLTreeLib.

This example demonstrates:
- Building a plain binary tree from a breadth-first layout
- Comparing an unbalanced search tree with an AVL tree
- Order statistics and removal
- Enabling the library's debug logging to watch rotations
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from avltreelib import (
    KeyNotFoundError,
    avl_sort,
    avl_tree,
    binary_search_tree,
    build_tree,
    collect_keys,
    get_tree_stats,
)


def main():
    """Walk through the main tree types."""
    layout = [5, 3, 8, None, 4, None, 9]
    tree = build_tree(layout)
    print(f"Layout {layout}")
    for strategy in ('pre_order', 'in_order', 'post_order', 'bfs'):
        print(f"  {strategy:<11} {collect_keys(tree, strategy)}")

    # Sorted input is the worst case for an unbalanced tree
    keys = list(range(1, 16))
    plain = binary_search_tree(keys)
    balanced = avl_tree(keys)
    print(f"\nInserting {len(keys)} sorted keys:")
    print(f"  Unbalanced: {get_tree_stats(plain)}")
    print(f"  AVL:        {get_tree_stats(balanced)}")

    print(f"\nsuccessor(7) = {balanced.successor(7)}")
    print(f"predecessor(7) = {balanced.predecessor(7)}")
    print(f"find(7) = {balanced.find(7)}")

    balanced.remove(8)
    print(f"After removing 8: {list(balanced)} (balanced: {balanced.is_balanced()})")
    try:
        balanced.remove(8)
    except KeyNotFoundError as e:
        print(f"Removing again: {e}")

    words = ["pear", "Fig", "banana", "Kiwi", "apple"]
    print(f"\navl_sort({words}, key=str.lower) = {avl_sort(words, key=str.lower)}")


if __name__ == "__main__":
    print("AVLTreeLib - Basic Usage Example")
    print("=" * 50)
    if "--debug" in sys.argv:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    main()
