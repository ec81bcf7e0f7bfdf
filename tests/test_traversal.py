"""Unit tests for traversal strategies and generation indexing.

Checks visit order for both strategies and the difference in how the skip
predicate behaves between them.
"""

import unittest

import pytest

from treelinq import (
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    Tree,
    TraversalStrategy,
    create_traverser,
    GenerationRangeError,
    TreeIndexError,
)
from species import build_deep_tree, build_sample_tree


class TestTraversalStrategies(unittest.TestCase):
    """Test visit order of each traversal strategy."""

    def setUp(self):
        self.tree = build_sample_tree()

    def test_depth_first_order(self):
        visited = []
        self.tree.traverse_depth_first(lambda node: visited.append(node.value))
        self.assertEqual(visited, ["root", "A", "C", "B"])

    def test_breadth_first_order(self):
        visited = []
        self.tree.traverse_breadth_first(lambda node: visited.append(node.value))
        self.assertEqual(visited, ["root", "A", "B", "C"])

    def test_deep_tree_orders(self):
        tree = build_deep_tree()
        self.assertEqual(tree.to_list_values_depth_first(), [1, 2, 4, 5, 3, 6, 7, 8])
        self.assertEqual(tree.to_list_values_breadth_first(), [1, 2, 3, 4, 5, 6, 7, 8])

    def test_depth_first_skip_prunes_subtree(self):
        visited = []
        self.tree.traverse_depth_first(
            lambda node: visited.append(node.value),
            skip=lambda node: node.value == "A",
        )
        self.assertEqual(visited, ["root", "B"])

    def test_breadth_first_skip_only_suppresses_node(self):
        visited = []
        self.tree.traverse_breadth_first(
            lambda node: visited.append(node.value),
            skip=lambda node: node.value == "A",
        )
        # C is still reached although its parent was skipped
        self.assertEqual(visited, ["root", "B", "C"])

    def test_skipping_root_depth_first_visits_nothing(self):
        visited = []
        self.tree.traverse_depth_first(lambda node: visited.append(node), skip=lambda node: node.is_root)
        self.assertEqual(visited, [])

    def test_traversal_from_subtree(self):
        tree = build_deep_tree()
        subtree = tree.get_by_child_indexes_path(1)
        self.assertEqual(subtree.to_list_values_depth_first(), [3, 6, 7, 8])
        self.assertEqual(subtree.to_list_values_breadth_first(), [3, 6, 7, 8])

    def test_root_only_tree(self):
        tree = Tree("only")
        self.assertEqual(tree.to_list_values_depth_first(), ["only"])
        self.assertEqual(tree.to_list_values_breadth_first(), ["only"])

    def test_static_traversal_entry_points(self):
        visited = []
        Tree.traverse_tree_depth_first(self.tree, lambda node: visited.append(node.value))
        Tree.traverse_tree_breadth_first(self.tree, lambda node: visited.append(node.value))
        self.assertEqual(visited, ["root", "A", "C", "B", "root", "A", "B", "C"])

    def test_traverse_iterator_accepts_strategy_names(self):
        self.assertEqual([n.value for n in self.tree.traverse("bfs")], ["root", "A", "B", "C"])
        self.assertEqual([n.value for n in self.tree.traverse("dfs")], ["root", "A", "C", "B"])

    def test_flattening_with_selectors(self):
        self.assertEqual(
            self.tree.to_list_depth_first(lambda node: node.generation_depth),
            [0, 1, 2, 1],
        )
        self.assertEqual(self.tree.to_list_values_breadth_first(str.lower), ["root", "a", "b", "c"])
        self.assertEqual(self.tree.to_list_breadth_first()[0], self.tree)


class TestTraverserObjects(unittest.TestCase):
    """Test the traverser classes directly."""

    def test_traversers_yield_nodes(self):
        tree = build_sample_tree()
        dfs = [n.value for n in DepthFirstPreOrderTraverser().traverse(tree)]
        bfs = [n.value for n in BreadthFirstTraverser().traverse(tree)]
        self.assertEqual(dfs, ["root", "A", "C", "B"])
        self.assertEqual(bfs, ["root", "A", "B", "C"])

    def test_traversal_is_lazy(self):
        tree = build_deep_tree()
        iterator = DepthFirstPreOrderTraverser().traverse(tree)
        self.assertEqual(next(iterator).value, 1)
        self.assertEqual(next(iterator).value, 2)

    def test_create_traverser(self):
        self.assertIsInstance(create_traverser(TraversalStrategy.DEPTH_FIRST_PRE), DepthFirstPreOrderTraverser)
        self.assertIsInstance(create_traverser("level_order"), BreadthFirstTraverser)
        self.assertIsInstance(create_traverser("BFS"), BreadthFirstTraverser)

    def test_create_traverser_unknown_strategy(self):
        with self.assertRaises(ValueError):
            create_traverser("dfs_post")


class TestGenerations(unittest.TestCase):
    """Test generation grouping and coordinates."""

    def setUp(self):
        self.tree = build_deep_tree()

    def test_generation_count(self):
        self.assertEqual(Tree("root").generation_count, 1)
        self.assertEqual(build_sample_tree().generation_count, 3)
        self.assertEqual(self.tree.generation_count, 4)

    def test_generations(self):
        values = [[node.value for node in generation] for generation in self.tree.generations]
        self.assertEqual(values, [[1], [2, 3], [4, 5, 6, 7], [8]])

    def test_get_generation_zero_is_root(self):
        leaf = self.tree.get_by_child_indexes_path(1, 1, 0)
        self.assertEqual(leaf.get_generation(0), [self.tree])
        self.assertIs(self.tree.get_generation(0)[0], self.tree)

    def test_get_generation_left_to_right(self):
        self.assertEqual([n.value for n in self.tree.get_generation(2)], [4, 5, 6, 7])

    def test_get_generation_beyond_tree_is_empty(self):
        self.assertEqual(self.tree.get_generation(10), [])

    def test_get_by_generation_coordinates(self):
        self.assertEqual(self.tree.get_by_generation_coordinates(0, 0).value, 1)
        self.assertEqual(self.tree.get_by_generation_coordinates(2, 3).value, 7)
        self.assertEqual(self.tree.get_by_generation_coordinates(3, 0).value, 8)

    def test_get_by_generation_coordinates_bad_depth(self):
        with self.assertRaises(GenerationRangeError):
            self.tree.get_by_generation_coordinates(4, 0)
        with self.assertRaises(GenerationRangeError):
            self.tree.get_by_generation_coordinates(-1, 0)

    def test_get_by_generation_coordinates_bad_index(self):
        with self.assertRaises(TreeIndexError):
            self.tree.get_by_generation_coordinates(1, 2)

    def test_get_by_child_indexes_path(self):
        self.assertIs(self.tree.get_by_child_indexes_path(), self.tree)
        self.assertEqual(self.tree.get_by_child_indexes_path(1, 1, 0).value, 8)

    def test_get_by_child_indexes_path_walks_from_root(self):
        child = self.tree.get_by_child_indexes_path(0)
        self.assertEqual(child.get_by_child_indexes_path(1).value, 3)

    def test_get_by_child_indexes_path_out_of_range(self):
        with self.assertRaises(TreeIndexError):
            self.tree.get_by_child_indexes_path(0, 2)
        with self.assertRaises(IndexError):
            self.tree.get_by_child_indexes_path(-1)


@pytest.mark.slow
def test_wide_tree_breadth_first_order():
    tree = Tree(0)
    for i in range(1, 201):
        child = tree.add_child_by_value(i)
        child.add_children_by_values(range(i * 1000, i * 1000 + 50))

    values = tree.to_list_values_breadth_first()

    assert values[:201] == list(range(201))
    assert len(values) == 1 + 200 + 200 * 50
