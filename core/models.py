"""
Core domain models for the ontology hierarchy.

These are plain data structures; the passes that mutate them live in
hierarchy.builder.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from .constants import AGGREGATE_NAME_PREFIX


class NodeKind(str, Enum):
    """How a node came into existence."""
    CLASS = "class"
    AGGREGATE = "aggregate"
    WRAPPER = "wrapper"


@dataclass(eq=False)
class HierarchyNode:
    """
    A vertex in the ontology hierarchy tree.

    `size` is written by the counting pass and has no meaning before it.
    Nodes compare by object identity: the same class IRI may legitimately
    appear under several parents as separate nodes.
    """
    uri: Optional[str]
    name: str = ""
    children: List['HierarchyNode'] = field(default_factory=list)
    size: int = 0
    kind: NodeKind = NodeKind.CLASS

    @classmethod
    def aggregate(cls, parent: 'HierarchyNode', size: int) -> 'HierarchyNode':
        """Create the "Other ..." node standing in for removed children of `parent`."""
        return cls(
            uri=None,
            name=AGGREGATE_NAME_PREFIX + parent.name,
            size=size,
            kind=NodeKind.AGGREGATE
        )

    @classmethod
    def wrapper(
        cls,
        uri: Optional[str],
        name: str,
        roots: Iterable['HierarchyNode']
    ) -> 'HierarchyNode':
        """Create a synthetic top-level node over several true roots."""
        return cls(uri=uri, name=name, children=list(roots), kind=NodeKind.WRAPPER)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_synthetic(self) -> bool:
        return self.kind is not NodeKind.CLASS

    def iter_preorder(self) -> Iterator[Tuple['HierarchyNode', int]]:
        """
        Walk this subtree parent-first without recursion.

        Yields:
            (node, depth) pairs, depth 0 being this node
        """
        stack = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            for child in reversed(node.children):
                stack.append((child, depth + 1))
