"""
Node counting strategies for the ontology hierarchy.

Counters are interchangeable through the NodeCounter interface: structural
(tree size) counting, or counts looked up from a CSV table or from ZOOMA.
"""

from .counter_base import NodeCounter
from .tree_size_counter import TreeSizeNodeCounter
from .lookup_counter import LookupNodeCounter
from .csv_counter import CsvNodeCounter, parse_count_row
from .zooma_counter import ZoomaNodeCounter, build_count_query
from .counter_factory import NodeCounterFactory

__all__ = [
    'NodeCounter',
    'TreeSizeNodeCounter',
    'LookupNodeCounter',
    'CsvNodeCounter',
    'parse_count_row',
    'ZoomaNodeCounter',
    'build_count_query',
    'NodeCounterFactory',
]
