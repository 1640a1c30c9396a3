"""Property-based tests for search trees.

Random key sequences are checked against Python's own sorting, and a
state machine compares a tree under random inserts and removals with a
sorted list.
"""

import bisect
import math
import sys
from pathlib import Path

from hypothesis import given, settings, strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, precondition, rule

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from avltreelib import (
    InsertMethod,
    KeyNotFoundError,
    NoPredecessorError,
    NoSuccessorError,
    avl_sort,
    avl_tree,
    binary_search_tree,
)
from avltreelib.testing import TreeInvariantChecker

keys_strategy = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=200)
unique_keys_strategy = st.lists(
    st.integers(min_value=-1000, max_value=1000), unique=True, max_size=200
)


@settings(deadline=None)
@given(keys_strategy)
def test_in_order_is_sorted(xs):
    assert list(binary_search_tree(xs)) == sorted(xs)
    assert list(avl_tree(xs)) == sorted(xs)


@settings(deadline=None)
@given(keys_strategy)
def test_avl_tree_is_balanced(xs):
    tree = avl_tree(xs)
    assert TreeInvariantChecker(tree).violations(balanced=True) == []
    assert len(tree) == len(xs)
    assert tree.height() <= 1.4405 * math.log2(len(xs) + 2) - 0.3277


@settings(deadline=None)
@given(keys_strategy)
def test_insert_methods_agree(xs):
    iterative = avl_tree(xs)
    recursive = avl_tree(xs, insert_method=InsertMethod.RECURSIVE)
    assert recursive.keys('pre_order') == iterative.keys('pre_order')


@settings(deadline=None)
@given(keys_strategy)
def test_traversal_variants_agree(xs):
    tree = avl_tree(xs)
    assert tree.keys('pre_order') == tree.keys('pre_order_iter')
    assert tree.keys('in_order') == tree.keys('in_order_iter')
    post = tree.keys('post_order')
    assert tree.keys('post_order_two_stacks') == post
    assert tree.keys('post_order_one_stack') == post
    assert sorted(tree.keys('bfs')) == sorted(xs)


@settings(deadline=None)
@given(unique_keys_strategy.filter(bool))
def test_successor_chain(xs):
    tree = avl_tree(xs)
    ordered = sorted(xs)
    for before, after in zip(ordered, ordered[1:]):
        assert tree.successor(before) == after
        assert tree.predecessor(after) == before
    assert tree.minimum() == ordered[0]
    assert tree.maximum() == ordered[-1]


@settings(deadline=None)
@given(unique_keys_strategy, st.data())
def test_remove_matches_set_difference(xs, data):
    removed = data.draw(st.lists(st.sampled_from(xs), unique=True) if xs else st.just([]))
    tree = binary_search_tree(xs)
    for key in removed:
        tree.remove(key)
    assert list(tree) == sorted(set(xs) - set(removed))
    assert TreeInvariantChecker(tree).violations() == []


@settings(deadline=None)
@given(st.lists(st.tuples(st.integers(0, 5), st.integers())))
def test_avl_sort_is_stable(pairs):
    assert avl_sort(pairs, key=lambda pair: pair[0]) == sorted(pairs, key=lambda pair: pair[0])


class SearchTreeMachine(RuleBasedStateMachine):
    """Drives an AVL tree and a sorted list through the same operations."""

    def __init__(self):
        super().__init__()
        self.tree = avl_tree()
        self.model = []
        self.removed = False

    @rule(key=st.integers(min_value=-50, max_value=50))
    def insert(self, key):
        self.tree.insert(key)
        bisect.insort(self.model, key)

    @precondition(lambda self: self.model)
    @rule(data=st.data())
    def remove_present(self, data):
        key = data.draw(st.sampled_from(self.model))
        self.tree.remove(key)
        self.model.remove(key)
        self.removed = True

    @rule(key=st.integers(min_value=-50, max_value=50))
    def remove_absent(self, key):
        if key in self.model:
            return
        try:
            self.tree.remove(key)
        except KeyNotFoundError:
            pass
        else:
            raise AssertionError(f"removed absent key {key}")

    @rule(key=st.integers(min_value=-50, max_value=50))
    def search(self, key):
        assert self.tree.search(key) == (key in self.model)
        expected = self.model.index(key) if key in self.model else -1
        assert self.tree.find(key) == expected

    @precondition(lambda self: self.model)
    @rule(data=st.data())
    def neighbours(self, data):
        key = data.draw(st.sampled_from(self.model))
        larger = self.model[bisect.bisect_right(self.model, key):]
        smaller = self.model[:bisect.bisect_left(self.model, key)]
        # With duplicates the neighbour may be an equal key, so only check distinct extremes
        if not larger and self.model.count(key) == 1:
            try:
                self.tree.successor(key)
            except NoSuccessorError:
                pass
            else:
                raise AssertionError(f"{key} has a successor")
        if not smaller and self.model.count(key) == 1:
            try:
                self.tree.predecessor(key)
            except NoPredecessorError:
                pass
            else:
                raise AssertionError(f"{key} has a predecessor")

    @invariant()
    def matches_model(self):
        assert list(self.tree) == self.model
        assert len(self.tree) == len(self.model)

    @invariant()
    def structure_is_valid(self):
        checker = TreeInvariantChecker(self.tree)
        # Removal does not rebalance, so balance is only guaranteed before one
        assert checker.violations(balanced=not self.removed) == []


SearchTreeMachine.TestCase.settings = settings(deadline=None, max_examples=50)
TestSearchTree = SearchTreeMachine.TestCase
