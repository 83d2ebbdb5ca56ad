"""
Base abstract class for node counters.

A counter attributes a size to each node of the hierarchy. The builder calls
count() bottom-up, so every child already carries its final size when its
parent is counted.
"""

from abc import ABC, abstractmethod

from core.models import HierarchyNode


class NodeCounter(ABC):
    """
    Abstract base class for node counters.

    Implementations must return a non-negative integer for every node.
    """

    @abstractmethod
    def count(self, node: HierarchyNode) -> int:
        """
        Compute the size of a node.

        Args:
            node: Node whose children have already been counted

        Returns:
            Size of the node, including its descendants
        """
        pass

    @staticmethod
    def sum_children(node: HierarchyNode) -> int:
        """Total size of the node's direct children."""
        return sum(child.size for child in node.children)
