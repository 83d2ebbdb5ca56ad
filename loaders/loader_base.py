"""
Base abstract class for ontology loaders.

A loader reads an ontology once and exposes the class maps the hierarchy
builder consumes: labels, type labels, synonyms and direct subclasses, all
keyed by class IRI.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Set, Union


class OntologyLoader(ABC):
    """
    Abstract base class for ontology loaders.

    Subclasses implement load_ontology(), which must set the ontology IRI
    and fill the class maps through the add_* methods.
    """

    def __init__(
        self,
        ontology_uri: str,
        ontology_file: Optional[Union[str, Path]] = None,
        synonym_uri: Optional[str] = None
    ):
        """
        Initialize the loader.

        Args:
            ontology_uri: IRI of the ontology to load
            ontology_file: Local copy to read instead of resolving the IRI
            synonym_uri: Annotation property holding synonyms, if any
        """
        self.ontology_uri = ontology_uri
        self.ontology_file = Path(ontology_file) if ontology_file else None
        self.synonym_uri = synonym_uri
        self.log = logging.getLogger(f"{__name__}.{type(self).__name__}")

        self._ontology_iri: Optional[str] = None
        self._labels: Optional[Dict[str, str]] = None
        self._type_labels: Optional[Dict[str, Set[str]]] = None
        self._synonyms: Optional[Dict[str, Set[str]]] = None
        self._children: Optional[Dict[str, Set[str]]] = None

    def _require(self, value):
        if value is None:
            raise RuntimeError(f"{type(self).__name__} has not been initialized")
        return value

    @property
    def ontology_iri(self) -> str:
        """IRI of the ontology actually loaded; may differ from ontology_uri."""
        return self._require(self._ontology_iri)

    @property
    def class_labels(self) -> Dict[str, str]:
        return self._require(self._labels)

    @property
    def class_type_labels(self) -> Dict[str, Set[str]]:
        """Labels of the superclasses of each class."""
        return self._require(self._type_labels)

    @property
    def class_synonyms(self) -> Dict[str, Set[str]]:
        return self._require(self._synonyms)

    @property
    def class_children(self) -> Dict[str, Set[str]]:
        """IRIs of the direct subclasses of each class."""
        return self._require(self._children)

    def load(self) -> 'OntologyLoader':
        """
        Load the ontology and fill the class maps.

        Returns:
            self, for chaining
        """
        self._labels = {}
        self._type_labels = {}
        self._synonyms = {}
        self._children = {}
        self.load_ontology()
        return self

    def set_ontology_iri(self, iri: str) -> None:
        self._ontology_iri = iri

    def add_class_label(self, cls_iri: str, label: str) -> None:
        self._labels[cls_iri] = label

    def add_class_types(self, cls_iri: str, type_labels: Set[str]) -> None:
        self._type_labels[cls_iri] = type_labels

    def add_synonyms(self, cls_iri: str, synonyms: Set[str]) -> None:
        self._synonyms[cls_iri] = synonyms

    def add_children(self, cls_iri: str, children: Set[str]) -> None:
        self._children[cls_iri] = children

    @abstractmethod
    def load_ontology(self) -> None:
        """
        Read the ontology and populate the class maps.

        Classes with no rdfs:label, or with more than one, get no label.
        """
        pass
