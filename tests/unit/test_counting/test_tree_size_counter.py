"""
Unit tests for counting.tree_size_counter module.
"""
import pytest
from core.models import HierarchyNode
from counting import TreeSizeNodeCounter


class TestTreeSizeNodeCounter:
    """Tests for structural counting."""

    def test_leaf_counts_one(self):
        """Test a node without children has size 1."""
        assert TreeSizeNodeCounter().count(HierarchyNode(uri="a")) == 1

    def test_parent_sums_children(self):
        """Test a parent sums its children's sizes."""
        parent = HierarchyNode(uri="p", children=[
            HierarchyNode(uri="a", size=3),
            HierarchyNode(uri="b", size=4),
        ])

        assert TreeSizeNodeCounter().count(parent) == 7

    def test_parent_does_not_add_own_weight(self):
        """Test a parent of three leaves has size 3, not 4."""
        counter = TreeSizeNodeCounter()
        leaves = [HierarchyNode(uri=str(i)) for i in range(3)]
        for leaf in leaves:
            leaf.size = counter.count(leaf)

        assert counter.count(HierarchyNode(uri="p", children=leaves)) == 3
