"""Unit tests for BinaryTree.

Tests construction forms, size/height queries, and the pre-order,
breadth-first and post-order traversals.
"""

import unittest

import pytest

from arbortreelib import (
    BinaryNode,
    BinaryTree,
    GenericNode,
    InvalidArgumentError,
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
)


def build_sample_tree() -> BinaryTree:
    """Create a tree used by several tests.

    Structure:
            1
           / \\
          2   3
         / \\   \\
        4   5   6
    """
    tree = BinaryTree(1, 2, 3)
    root = tree.get_root()
    root.visit_left().add(4)
    root.visit_left().add(5)
    root.visit_right().set_right(6)
    return tree


class TestBinaryTreeConstruction(unittest.TestCase):

    def test_empty_tree(self):
        tree = BinaryTree()

        self.assertTrue(tree.is_empty())
        self.assertIsNone(tree.get_root())
        self.assertEqual(tree.size(), 0)
        self.assertEqual(len(tree), 0)
        self.assertEqual(tree.get_height(), -1)
        self.assertEqual(tree.traverse(), [])
        self.assertEqual(tree.traverse_breadth_first(), [])
        self.assertEqual(list(tree), [])
        self.assertEqual(str(tree), "[]")

    def test_singleton(self):
        tree = BinaryTree(7)

        self.assertFalse(tree.is_empty())
        self.assertEqual(tree.size(), 1)
        self.assertEqual(tree.get_height(), 0)
        self.assertEqual(tree.traverse(), [7])

    def test_root_left_right(self):
        tree = BinaryTree(5, 3, 8)

        self.assertEqual(tree.size(), 3)
        self.assertEqual(tree.get_height(), 1)
        self.assertEqual(tree.traverse(), [5, 3, 8])

    def test_root_with_right_only(self):
        tree = BinaryTree(5, right=8)
        root = tree.get_root()

        self.assertFalse(root.has_left())
        self.assertEqual(root.visit_right().get_value(), 8)
        self.assertEqual(tree.traverse(), [5, 8])

    def test_from_existing_node(self):
        node = BinaryNode(1)
        node.add(2)
        node.add(3)

        tree = BinaryTree(node)

        self.assertIs(tree.get_root(), node)
        self.assertEqual(tree.size(), node.size())
        self.assertEqual(tree.size(), 3)

    def test_children_without_root(self):
        with self.assertRaises(InvalidArgumentError):
            BinaryTree(None, 3, 8)

    def test_children_with_existing_node(self):
        with self.assertRaises(InvalidArgumentError):
            BinaryTree(BinaryNode(1), 2)

    def test_generic_node_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            BinaryTree(GenericNode(1))


class TestBinaryTreeQueries(unittest.TestCase):

    def setUp(self):
        self.tree = build_sample_tree()

    def test_pre_order(self):
        self.assertEqual(self.tree.traverse(), [1, 2, 4, 5, 3, 6])

    def test_breadth_first(self):
        self.assertEqual(self.tree.traverse_breadth_first(), [1, 2, 3, 4, 5, 6])

    def test_post_order(self):
        self.assertEqual(self.tree.traverse_post_order(), [4, 5, 2, 6, 3, 1])

    def test_height_and_size(self):
        self.assertEqual(self.tree.get_height(), 2)
        self.assertEqual(self.tree.size(), 6)

    def test_size_tracks_mutation_after_construction(self):
        self.tree.get_root().visit_right().set_left(7)

        self.assertEqual(self.tree.size(), 7)
        self.assertEqual(len(self.tree), 7)
        self.assertEqual(self.tree.traverse(), [1, 2, 4, 5, 3, 7, 6])

    def test_iteration_is_pre_order_and_restartable(self):
        first = list(self.tree)
        second = list(self.tree)

        self.assertEqual(first, [1, 2, 4, 5, 3, 6])
        self.assertEqual(first, second)

    def test_iterators_are_independent(self):
        it1 = iter(self.tree)
        next(it1)
        it2 = iter(self.tree)

        self.assertEqual(next(it2), 1)
        self.assertEqual(next(it1), 2)

    def test_node_iterator_yields_real_nodes(self):
        nodes = list(self.tree.node_iterator())

        self.assertIs(nodes[0], self.tree.get_root())
        self.assertEqual([n.get_value() for n in nodes], [1, 2, 4, 5, 3, 6])
        self.assertIs(nodes[2].get_parent(), nodes[1])

    def test_str_and_repr(self):
        self.assertEqual(str(self.tree), "[1, 2, 4, 5, 3, 6]")
        self.assertEqual(repr(self.tree), "BinaryTree([1, 2, 4, 5, 3, 6])")

    def test_update_through_node_iterator(self):
        for node in self.tree.node_iterator():
            node.update(node.get_value() * 10)

        self.assertEqual(self.tree.traverse(), [10, 20, 40, 50, 30, 60])


def test_breadth_first_small_tree():
    """Each node visited exactly once."""
    assert BinaryTree(1, 2, 3).traverse_breadth_first() == [1, 2, 3]


def test_breadth_first_descends_past_root_children():
    tree = BinaryTree(1, 2)
    tree.get_root().visit_left().add(3).add(4)

    assert tree.traverse_breadth_first() == [1, 2, 3, 4]


def test_walk_with_config():
    tree = build_sample_tree()
    config = TraversalConfig(
        strategy=TraversalStrategy.BREADTH_FIRST,
        data_requirements=DataRequirement.PATH,
    )

    paths = [data for _, data in tree.walk(config)]

    assert paths[0] == [1]
    assert paths[-1] == [1, 3, 6]


def test_walk_default_is_pre_order_values():
    tree = build_sample_tree()

    assert [value for _, value in tree.walk()] == tree.traverse()


def test_walk_empty_tree():
    assert list(BinaryTree().walk()) == []


@pytest.mark.parametrize("depth", [10, 2000])
def test_deep_left_chain(depth):
    root = BinaryNode(0)
    node = root
    for value in range(1, depth + 1):
        node = node.set_left(value)

    tree = BinaryTree(root)

    assert tree.get_height() == depth
    assert tree.size() == depth + 1
    assert tree.traverse() == list(range(depth + 1))
