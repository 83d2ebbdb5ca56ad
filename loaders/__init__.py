"""Ontology loaders - Class labels, synonyms and hierarchy from OWL files."""

from .loader_base import OntologyLoader
from .owl_loaders import (
    OwlreadyOntologyLoader,
    AssertedOntologyLoader,
    ReasonedOntologyLoader,
)
from .loader_factory import create_ontology_loader

__all__ = [
    'OntologyLoader',
    'OwlreadyOntologyLoader',
    'AssertedOntologyLoader',
    'ReasonedOntologyLoader',
    'create_ontology_loader',
]
