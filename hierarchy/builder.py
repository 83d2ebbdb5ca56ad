"""
Ontology Hierarchy Builder.

Turns the parent -> children class map of an ontology into a size-annotated
tree in four passes:

1. construction: resolve the class graph into an acyclic edge set with one
   node per class, shared by all of its parents
2. counting: post-order, sizes from the configured NodeCounter, once per class
3. pruning: pre-order, the class graph is unfolded into a tree (one node per
   parent path) and nothing below max_depth is copied
4. grouping: post-order, children smaller than min_size are folded into
   a single "Other <parent>" node

Every pass walks the tree with an explicit stack, so neither deep hierarchies
nor cycles in the class graph can exhaust the interpreter's recursion limit.
Counting before unfolding keeps the work proportional to the number of classes
plus the size of the output, even when repeated multiple inheritance makes the
number of parent paths grow exponentially.
"""
import logging
from dataclasses import replace
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from core.constants import ONE_PERCENT_MAX_MIN_SIZE, UNLIMITED
from core.models import HierarchyNode
from counting import NodeCounter, TreeSizeNodeCounter

logger = logging.getLogger(__name__)

# DFS marks used while resolving the class graph
IN_PROGRESS = 1
DONE = 2

_EXHAUSTED = object()


def _ordered_children(children: Mapping[str, Iterable[str]], uri: str):
    return iter(sorted(set(children.get(uri) or ()), key=str))


def resolve_edges(
    children: Mapping[str, Iterable[str]]
) -> Tuple[Dict[str, List[str]], List[str]]:
    """
    Reduce the class graph to the edges that will appear in the tree.

    Only identities present as keys of `children` are known; edges to
    anything else (owl:Thing, owl:Nothing, foreign classes) are dropped, as
    are self edges. Keys are visited in mapping order and child identities
    in sorted order, so when the graph contains a cycle the edge that closes
    it is always the same one; it is logged and dropped.

    Args:
        children: Class identity -> identities of its direct subclasses

    Returns:
        Tuple of (kept edges per known identity, true roots in key order)
    """
    candidate_roots = dict.fromkeys(children)
    edges: Dict[str, List[str]] = {}
    state: Dict[str, int] = {}

    for start in children:
        if start in state:
            continue

        state[start] = IN_PROGRESS
        edges[start] = []
        stack = [(start, _ordered_children(children, start))]

        while stack:
            uri, pending = stack[-1]
            child_uri = next(pending, _EXHAUSTED)
            if child_uri is _EXHAUSTED:
                state[uri] = DONE
                stack.pop()
                continue

            if child_uri == uri:
                logger.debug("Ignoring self-referential edge on %s", uri)
                continue
            if child_uri not in children:
                logger.debug("Omitting unknown child %s of %s", child_uri, uri)
                continue

            child_state = state.get(child_uri)
            if child_state == IN_PROGRESS:
                logger.warning(
                    "Cycle in class hierarchy: dropping edge %s -> %s", uri, child_uri
                )
                continue

            # having a parent disqualifies the child as a root
            edges[uri].append(child_uri)
            candidate_roots.pop(child_uri, None)

            if child_state is None:
                state[child_uri] = IN_PROGRESS
                edges[child_uri] = []
                stack.append((child_uri, _ordered_children(children, child_uri)))

    return edges, list(candidate_roots)


def _postorder(root: HierarchyNode) -> Iterator[HierarchyNode]:
    """Yield each distinct node of a class graph after all of its children."""
    seen = {root}
    stack = [(root, iter(root.children))]
    while stack:
        node, pending = stack[-1]
        child = next(pending, _EXHAUSTED)
        if child is _EXHAUSTED:
            stack.pop()
            yield node
        elif child not in seen:
            seen.add(child)
            stack.append((child, iter(child.children)))


class OntologyHierarchyBuilder:
    """
    Builds a pruned, grouped, size-annotated hierarchy from an ontology.
    """

    def __init__(
        self,
        counter: Optional[NodeCounter] = None,
        max_depth: int = UNLIMITED,
        min_size: int = UNLIMITED
    ):
        """
        Initialize hierarchy builder.

        Args:
            counter: Strategy for sizing nodes (default: TreeSizeNodeCounter)
            max_depth: Deepest level that keeps its children, -1 for no limit
            min_size: Smallest subtree rendered on its own, -1 to disable grouping

        Raises:
            ValueError: If max_depth or min_size is below -1
        """
        if max_depth < UNLIMITED:
            raise ValueError(f"max_depth must be -1 or a non-negative integer, got {max_depth}")
        if min_size < UNLIMITED:
            raise ValueError(f"min_size must be -1 or a non-negative integer, got {min_size}")

        self.counter = counter if counter is not None else TreeSizeNodeCounter()
        self.max_depth = max_depth
        self.min_size = min_size

    def build(
        self,
        children: Mapping[str, Iterable[str]],
        labels: Mapping[str, str],
        ontology_uri: Optional[str] = None,
        ontology_name: Optional[str] = None
    ) -> HierarchyNode:
        """
        Run all four passes over a class graph.

        Args:
            children: Class identity -> identities of its direct subclasses
            labels: Class identity -> label
            ontology_uri: Identity of the ontology, used for the root wrapper
            ontology_name: Name of the root wrapper (default: ontology_uri)

        Returns:
            Root of the finished tree
        """
        root = self.construct_tree(children, labels, ontology_uri, ontology_name)
        self.count_tree(root)
        root = self.prune_tree(root)
        self.group_tree(root)
        return root

    def build_from_loader(self, loader) -> HierarchyNode:
        """Run all four passes over the classes of a loaded ontology."""
        return self.build(
            loader.class_children,
            loader.class_labels,
            ontology_uri=loader.ontology_iri
        )

    def construct_tree(
        self,
        children: Mapping[str, Iterable[str]],
        labels: Mapping[str, str],
        ontology_uri: Optional[str] = None,
        ontology_name: Optional[str] = None
    ) -> HierarchyNode:
        """
        Convert the class graph into a rooted graph of nodes.

        Every class becomes exactly one node, shared by all of its parents;
        prune_tree later unfolds shared nodes into one copy per parent path.

        Returns:
            The single true root, or a wrapper node over all true roots
        """
        edges, roots = resolve_edges(children)

        classes = {uri: HierarchyNode(uri=uri, name=labels.get(uri) or "") for uri in edges}
        for uri, node in classes.items():
            node.children = [classes[child_uri] for child_uri in edges[uri]]

        root_nodes = [classes[uri] for uri in roots]
        if len(root_nodes) == 1:
            return root_nodes[0]

        logger.debug("Found %d root classes, wrapping them in %s", len(root_nodes), ontology_uri)
        name = ontology_name or ontology_uri or ""
        return HierarchyNode.wrapper(ontology_uri, name, root_nodes)

    def count_tree(self, root: HierarchyNode) -> None:
        """Assign every node its size, children before parents, once per node."""
        for node in _postorder(root):
            node.size = self.counter.count(node)

    def prune_tree(self, root: HierarchyNode) -> HierarchyNode:
        """
        Unfold a counted graph into a tree, stopping at max_depth.

        A node reachable through several parents is copied once per parent
        path. Nodes at max_depth are copied without their children, and their
        size keeps standing for the whole elided subtree.

        Returns:
            Root of the unfolded tree; no node in it is shared
        """
        tree = replace(root, children=[])
        stack = [(root, tree, 0)]
        while stack:
            source, node, depth = stack.pop()
            if self.max_depth != UNLIMITED and depth >= self.max_depth:
                if source.children:
                    logger.debug(
                        "Pruning tree under %s: this has a depth of %d (size %d)",
                        source.name, depth, source.size
                    )
                continue

            for child in source.children:
                copy = replace(child, children=[])
                node.children.append(copy)
                stack.append((child, copy, depth + 1))
        return tree

    def group_tree(self, root: HierarchyNode) -> None:
        """
        Fold children smaller than min_size into one aggregate node per parent.

        Children are grouped before their parents; the aggregate nodes created
        here are not visited again.
        """
        if self.min_size == UNLIMITED:
            return

        nodes = [node for node, _ in root.iter_preorder()]
        for node in reversed(nodes):
            keep = [child for child in node.children if child.size >= self.min_size]
            if len(keep) == len(node.children):
                continue

            removal_size = sum(
                child.size for child in node.children if child.size < self.min_size
            )
            node.children = keep
            if removal_size > 0:
                node.children.append(HierarchyNode.aggregate(node, removal_size))


def one_percent_min_size(labels: Mapping[str, str]) -> int:
    """Minimum subtree size of 1% of the labelled classes, capped at 500."""
    return min(ONE_PERCENT_MAX_MIN_SIZE, int(len(labels) * 0.01))


def generate_hierarchy(
    loader,
    counter: Optional[NodeCounter] = None,
    max_depth: int = UNLIMITED,
    min_size: int = UNLIMITED
) -> HierarchyNode:
    """
    Build the hierarchy of a loaded ontology.

    Args:
        loader: Loaded OntologyLoader
        counter: Node counter (default: TreeSizeNodeCounter)
        max_depth: Deepest level that keeps its children, -1 for no limit
        min_size: Smallest subtree rendered on its own, -1 to disable grouping

    Returns:
        Root of the finished tree
    """
    builder = OntologyHierarchyBuilder(counter, max_depth=max_depth, min_size=min_size)
    return builder.build_from_loader(loader)


def generate_one_percent_hierarchy(
    loader,
    counter: Optional[NodeCounter] = None
) -> HierarchyNode:
    """Build an unlimited-depth hierarchy grouping subtrees under 1% of the classes."""
    min_size = one_percent_min_size(loader.class_labels)
    logger.info("Grouping subtrees smaller than %d classes", min_size)
    return generate_hierarchy(loader, counter, min_size=min_size)
