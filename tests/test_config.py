"""Tests for TreeConfig validation and TreePlan component selection."""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from avltreelib import (
    TreeConfig,
    TreePlan,
    TraversalStrategy,
    BalancingStrategy,
    InsertMethod,
    ConfigurationError,
    TreeError,
    SearchTree,
    Rebalancer,
    NoRebalancing,
    AVLRebalancer,
    NaturalOrdering,
    KeyOrdering,
    Ordering,
    BreadthFirstTraverser,
    IterativeInOrderTraverser,
)
from avltreelib.planning import resolve_traverser


class TestTreeConfig(unittest.TestCase):
    """Test configuration defaults and validation."""

    def test_defaults(self):
        config = TreeConfig()
        self.assertEqual(config.balancing, BalancingStrategy.NONE)
        self.assertEqual(config.insert_method, InsertMethod.ITERATIVE)
        self.assertEqual(config.traversal, TraversalStrategy.IN_ORDER_ITERATIVE)
        self.assertIsNone(config.key)
        self.assertFalse(config.reverse)
        self.assertEqual(config.validate(), [])

    def test_convenience_constructors(self):
        self.assertEqual(TreeConfig.unbalanced().balancing, BalancingStrategy.NONE)
        avl = TreeConfig.avl(key=abs)
        self.assertEqual(avl.balancing, BalancingStrategy.AVL)
        self.assertIs(avl.key, abs)

    def test_wrong_enum_types(self):
        config = TreeConfig(balancing='avl', insert_method='fast', traversal=3)
        errors = config.validate()
        self.assertEqual(len(errors), 3)
        self.assertIn('balancing must be a BalancingStrategy', errors[0])

    def test_key_must_be_callable(self):
        self.assertIn("key must be callable", TreeConfig(key=5).validate())

    def test_custom_ordering_excludes_key_and_reverse(self):
        errors = TreeConfig(custom_ordering=NaturalOrdering(), reverse=True).validate()
        self.assertEqual(errors, ["custom_ordering cannot be combined with key or reverse"])

    def test_custom_strategies_need_components(self):
        config = TreeConfig(
            balancing=BalancingStrategy.CUSTOM,
            traversal=TraversalStrategy.CUSTOM,
        )
        errors = config.validate()
        self.assertIn("custom_rebalancer required when balancing is CUSTOM", errors)
        self.assertIn("custom_traverser required when traversal is CUSTOM", errors)


class TestTreePlan(unittest.TestCase):
    """Test component selection."""

    def test_default_plan(self):
        plan = TreePlan()
        self.assertIsInstance(plan.ordering, NaturalOrdering)
        self.assertIsInstance(plan.rebalancer, NoRebalancing)
        self.assertIsInstance(plan.traverser, IterativeInOrderTraverser)
        self.assertEqual(plan.insert_method, InsertMethod.ITERATIVE)

    def test_avl_plan(self):
        plan = TreePlan(TreeConfig.avl())
        self.assertIsInstance(plan.rebalancer, AVLRebalancer)

    def test_key_and_reverse_select_key_ordering(self):
        plan = TreePlan(TreeConfig(key=len, reverse=True))
        self.assertIsInstance(plan.ordering, KeyOrdering)
        self.assertTrue(plan.ordering.less('ccc', 'a'))

    def test_invalid_config_raises(self):
        with self.assertRaises(ConfigurationError) as ctx:
            TreePlan(TreeConfig(key=5))
        self.assertIn("Invalid configuration", str(ctx.exception))
        self.assertIsInstance(ctx.exception, TreeError)

    def test_invalid_config_rejected_by_tree(self):
        with self.assertRaises(ConfigurationError):
            SearchTree([1, 2], config=TreeConfig(balancing=BalancingStrategy.CUSTOM))

    def test_summary(self):
        summary = TreePlan(TreeConfig(
            balancing=BalancingStrategy.AVL,
            insert_method=InsertMethod.RECURSIVE,
            traversal=TraversalStrategy.BREADTH_FIRST,
        )).get_summary()
        self.assertEqual(summary['balancing'], 'avl')
        self.assertEqual(summary['insert_method'], 'recursive')
        self.assertEqual(summary['traversal'], 'bfs')
        self.assertEqual(summary['rebalancer'], 'AVLRebalancer')
        self.assertEqual(summary['traverser'], 'BreadthFirstTraverser')
        self.assertTrue(summary['recursive_insert'])


class TestCustomComponents(unittest.TestCase):
    """Test user-supplied ordering, rebalancer and traverser."""

    def test_custom_ordering(self):
        class ModuloOrdering(Ordering):
            def less(self, a, b):
                return a % 10 < b % 10

            def equal(self, a, b):
                return a % 10 == b % 10

        tree = SearchTree([13, 21, 35], config=TreeConfig(custom_ordering=ModuloOrdering()))
        self.assertEqual(list(tree), [21, 13, 35])
        self.assertTrue(tree.search(3))

    def test_custom_rebalancer(self):
        class CountingRebalancer(Rebalancer):
            def __init__(self):
                super().__init__()
                self.calls = 0

            def rebalance(self, tree, node):
                self.calls += 1

            def is_balanced(self, root):
                return True

        rebalancer = CountingRebalancer()
        config = TreeConfig(balancing=BalancingStrategy.CUSTOM, custom_rebalancer=rebalancer)
        tree = SearchTree([3, 1, 2], config=config)
        self.assertIs(tree.rebalancer, rebalancer)
        self.assertEqual(rebalancer.calls, 3)

    def test_custom_traverser(self):
        config = TreeConfig(
            traversal=TraversalStrategy.CUSTOM,
            custom_traverser=BreadthFirstTraverser(),
        )
        tree = SearchTree([2, 1, 3, 4], config=config)
        self.assertEqual(tree.keys(), [2, 1, 3, 4])

    def test_configured_default_traversal(self):
        tree = SearchTree([2, 1, 3], config=TreeConfig(traversal=TraversalStrategy.PRE_ORDER))
        self.assertEqual(tree.keys(), [2, 1, 3])
        self.assertEqual(tree.keys(TraversalStrategy.POST_ORDER), [1, 3, 2])


class TestResolveTraverser(unittest.TestCase):
    """Test strategy resolution."""

    def test_instances_pass_through(self):
        traverser = BreadthFirstTraverser()
        self.assertIs(resolve_traverser(traverser), traverser)

    def test_enum_and_name(self):
        self.assertIsInstance(resolve_traverser(TraversalStrategy.BREADTH_FIRST), BreadthFirstTraverser)
        self.assertIsInstance(resolve_traverser('in_order_iter'), IterativeInOrderTraverser)

    def test_custom_enum_rejected(self):
        with self.assertRaises(ValueError):
            resolve_traverser(TraversalStrategy.CUSTOM)


if __name__ == '__main__':
    unittest.main()
