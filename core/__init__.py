"""Core package - Domain models, constants and errors."""

from .models import HierarchyNode, NodeKind
from .constants import (
    UNLIMITED,
    DEFAULT_SYNONYM_URI,
    OBSOLETE_CLASS_URI,
    CSV_HEADER_MARKER,
    AGGREGATE_NAME_PREFIX,
    ONE_PERCENT_MAX_MIN_SIZE,
    ZOOMA_QUERY_URL,
    ZOOMA_DEFAULT_DATASOURCE,
    ZOOMA_COUNT_QUERY,
)
from .exceptions import (
    Owl2JsonError,
    OntologyLoadError,
    CounterInitializationError,
    SerializationError,
)

__all__ = [
    'HierarchyNode',
    'NodeKind',
    'UNLIMITED',
    'DEFAULT_SYNONYM_URI',
    'OBSOLETE_CLASS_URI',
    'CSV_HEADER_MARKER',
    'AGGREGATE_NAME_PREFIX',
    'ONE_PERCENT_MAX_MIN_SIZE',
    'ZOOMA_QUERY_URL',
    'ZOOMA_DEFAULT_DATASOURCE',
    'ZOOMA_COUNT_QUERY',
    'Owl2JsonError',
    'OntologyLoadError',
    'CounterInitializationError',
    'SerializationError',
]
