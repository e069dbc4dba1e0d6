"""Tests for the high-level functional API."""

import pytest

from arbortreelib import (
    BinarySearchTree,
    BinaryTree,
    NTree,
    ConfigurationError,
    DataRequirement,
    TraversalStrategy,
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    get_tree_paths,
    get_leaf_nodes,
    get_tree_stats,
)


@pytest.fixture
def bst():
    return BinarySearchTree([5, 3, 8, 1, 4, 9])


def values(nodes):
    return [node.get_value() for node in nodes]


class TestTraverseTree:

    def test_accepts_tree(self, bst):
        assert values(traverse_tree(bst)) == [5, 3, 1, 4, 8, 9]

    def test_accepts_node(self, bst):
        three = bst.get_root().visit_left()

        assert values(traverse_tree(three)) == [3, 1, 4]

    @pytest.mark.parametrize("strategy, expected", [
        ("bfs", [5, 3, 8, 1, 4, 9]),
        ("dfs_post", [1, 4, 3, 9, 8, 5]),
        (TraversalStrategy.LEVEL_ORDER, [5, 3, 8, 1, 4, 9]),
        ("pre_order", [5, 3, 1, 4, 8, 9]),
    ])
    def test_strategies(self, bst, strategy, expected):
        assert values(traverse_tree(bst, strategy=strategy)) == expected

    def test_depth_limits(self, bst):
        assert values(traverse_tree(bst, max_depth=1)) == [5, 3, 8]
        assert values(traverse_tree(bst, min_depth=2)) == [1, 4, 9]

    def test_exclude_filter(self, bst):
        result = traverse_tree(bst, exclude_filter=lambda n: n.get_value() > 4)

        assert values(result) == [3, 1, 4]

    def test_max_nodes_passthrough(self, bst):
        assert values(traverse_tree(bst, max_nodes=2)) == [5, 3]

    def test_empty_tree(self):
        assert list(traverse_tree(BinaryTree())) == []

    def test_unknown_strategy(self, bst):
        with pytest.raises(ValueError):
            traverse_tree(bst, strategy="zigzag")

    def test_invalid_config_raised_eagerly(self, bst):
        with pytest.raises(ConfigurationError):
            traverse_tree(bst, max_depth=-1)


class TestHelpers:

    def test_collect_tree_data(self, bst):
        result = list(collect_tree_data(bst, DataRequirement.VALUE, strategy="bfs"))

        assert [data for _, data in result] == [5, 3, 8, 1, 4, 9]
        assert result[0][0] is bst.get_root()

    def test_count_nodes(self, bst):
        assert count_nodes(bst) == bst.size() == 6
        assert count_nodes(bst, max_depth=1) == 3
        assert count_nodes(NTree()) == 0

    def test_find_nodes(self, bst):
        evens = find_nodes(bst, lambda n: n.get_value() % 2 == 0)

        assert values(evens) == [4, 8]

    def test_get_leaf_nodes(self, bst):
        assert values(get_leaf_nodes(bst)) == [1, 4, 9]

    def test_get_tree_paths(self, bst):
        paths = list(get_tree_paths(bst))

        assert paths[0] == [5]
        assert [5, 3, 4] in paths
        assert [5, 8, 9] in paths
        assert len(paths) == 6

    def test_get_tree_stats(self):
        stats = get_tree_stats(BinaryTree(5, 3, 8))

        assert stats['total_nodes'] == 3
        assert stats['leaf_nodes'] == 2
        assert stats['internal_nodes'] == 1
        assert stats['max_depth'] == 1
        assert stats['max_branching'] == 2
        assert stats['depths'] == {0: 1, 1: 2}
        assert stats['average_branching'] == 2.0

    def test_get_tree_stats_ntree(self):
        tree = NTree("root")
        for name in ("a", "b", "c", "d"):
            tree.get_root().add(name)
        tree.get_root().visit(0).add("a1")

        stats = get_tree_stats(tree)

        assert stats['total_nodes'] == 6
        assert stats['leaf_nodes'] == 4
        assert stats['max_branching'] == 4
        assert stats['max_depth'] == tree.get_height() == 2
        assert stats['average_branching'] == 2.5

    def test_get_tree_stats_depth_limited(self):
        stats = get_tree_stats(BinaryTree(1, 2, 3), max_depth=0)

        assert stats['total_nodes'] == 1
        assert stats['internal_nodes'] == 1
        assert stats['max_branching'] == 2
        assert stats['average_branching'] == 2.0

    def test_get_tree_stats_empty(self):
        stats = get_tree_stats(NTree())

        assert stats['total_nodes'] == 0
        assert stats['average_branching'] == 0
