"""
Counter that sizes nodes by the number of leaves beneath them.
"""

from core.models import HierarchyNode
from .counter_base import NodeCounter


class TreeSizeNodeCounter(NodeCounter):
    """
    A leaf has size 1; any other node is the sum of its children.

    A term with three leaf children therefore has size 3, and so does its
    parent if it has no other children.
    """

    def count(self, node: HierarchyNode) -> int:
        if node.is_leaf:
            return 1
        return self.sum_children(node)
