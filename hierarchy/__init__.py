"""Hierarchy package - Tree construction, pruning, grouping and JSON output."""

from .builder import (
    OntologyHierarchyBuilder,
    resolve_edges,
    one_percent_min_size,
    generate_hierarchy,
    generate_one_percent_hierarchy,
)
from .schemas import HierarchyNodeDocument
from .serializer import convert_hierarchy_to_json, save_json

__all__ = [
    'OntologyHierarchyBuilder',
    'resolve_edges',
    'one_percent_min_size',
    'generate_hierarchy',
    'generate_one_percent_hierarchy',
    'HierarchyNodeDocument',
    'convert_hierarchy_to_json',
    'save_json',
]
