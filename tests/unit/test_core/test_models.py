"""
Unit tests for core.models module.
"""
import pytest
from core.models import HierarchyNode, NodeKind


class TestHierarchyNode:
    """Tests for HierarchyNode dataclass."""

    def test_initialization(self):
        """Test creating a class node with defaults."""
        node = HierarchyNode(uri="http://example.org/A", name="A")

        assert node.uri == "http://example.org/A"
        assert node.name == "A"
        assert node.children == []
        assert node.size == 0
        assert node.kind is NodeKind.CLASS
        assert node.is_leaf
        assert not node.is_synthetic

    def test_children_default_list(self):
        """Test children lists are independent between nodes."""
        first = HierarchyNode(uri="a")
        second = HierarchyNode(uri="b")

        first.children.append(HierarchyNode(uri="c"))

        assert len(second.children) == 0

    def test_equality_is_identity(self):
        """Test two nodes for the same IRI are distinct."""
        assert HierarchyNode(uri="a") != HierarchyNode(uri="a")


class TestSyntheticNodes:
    """Tests for aggregate and wrapper factories."""

    def test_aggregate(self):
        """Test aggregate node naming and size."""
        parent = HierarchyNode(uri="p", name="Root")

        other = HierarchyNode.aggregate(parent, 7)

        assert other.uri is None
        assert other.name == "Other Root"
        assert other.size == 7
        assert other.children == []
        assert other.kind is NodeKind.AGGREGATE
        assert other.is_synthetic

    def test_aggregate_of_unlabelled_parent(self):
        """Test aggregate name when the parent has no label."""
        other = HierarchyNode.aggregate(HierarchyNode(uri="p"), 1)

        assert other.name == "Other "

    def test_wrapper(self):
        """Test wrapper node holds the roots."""
        roots = [HierarchyNode(uri="a"), HierarchyNode(uri="b")]

        wrapper = HierarchyNode.wrapper("http://example.org/onto", "onto", roots)

        assert wrapper.uri == "http://example.org/onto"
        assert wrapper.kind is NodeKind.WRAPPER
        assert [c.uri for c in wrapper.children] == ["a", "b"]


class TestTraversal:
    """Tests for iter_preorder."""

    def test_preorder_with_depth(self):
        """Test parents are yielded before children, with depths."""
        leaf = HierarchyNode(uri="c")
        middle = HierarchyNode(uri="b", children=[leaf])
        sibling = HierarchyNode(uri="d")
        root = HierarchyNode(uri="a", children=[middle, sibling])

        visited = [(node.uri, depth) for node, depth in root.iter_preorder()]

        assert visited == [("a", 0), ("b", 1), ("c", 2), ("d", 1)]

    def test_deep_chain_does_not_recurse(self):
        """Test a chain deeper than the recursion limit is walked."""
        root = HierarchyNode(uri="0")
        node = root
        for i in range(1, 5000):
            child = HierarchyNode(uri=str(i))
            node.children.append(child)
            node = child

        depths = [depth for _, depth in root.iter_preorder()]

        assert max(depths) == 4999

