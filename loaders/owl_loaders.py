"""
Ontology loaders built on owlready2.

AssertedOntologyLoader uses only the axioms stated in the ontology;
ReasonedOntologyLoader classifies the ontology with HermiT first and reads
the inferred hierarchy.
"""

from typing import Iterable, Optional, Set

from owlready2 import (
    OwlReadyInconsistentOntologyError,
    ThingClass,
    World,
    sync_reasoner,
)

from core.constants import OBSOLETE_CLASS_URI
from core.exceptions import OntologyLoadError
from .loader_base import OntologyLoader


def literal_values(values: Iterable) -> Set[str]:
    """Keep the string literals of an annotation value list."""
    return {str(value) for value in values if isinstance(value, str)}


class OwlreadyOntologyLoader(OntologyLoader):
    """
    Shared owlready2 plumbing: a private World per loader, ontology reading,
    and per-class label, type, synonym and child extraction.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.world: Optional[World] = None

    def read_ontology(self):
        """Read the ontology into a fresh World and record its IRI."""
        self.log.debug("Loading ontology...")
        self.world = World()
        ontology = self.world.get_ontology(self.ontology_uri)
        if self.ontology_file is not None:
            self.log.info(
                "Mapping ontology IRI from %s to %s",
                self.ontology_uri, self.ontology_file.resolve()
            )
            with open(self.ontology_file, 'rb') as f:
                ontology.load(fileobj=f)
        else:
            ontology.load()

        ontology_iri = ontology.base_iri.rstrip('#')
        self.set_ontology_iri(ontology_iri)
        self.log.debug("Successfully loaded ontology %s", ontology_iri)
        return ontology

    def synonym_property(self):
        if self.synonym_uri is None:
            return None
        return self.world.search_one(iri=self.synonym_uri)

    def class_label(self, cls: ThingClass) -> Optional[str]:
        labels = literal_values(cls.label)
        if not labels:
            self.log.warning(
                "OWLClass %s contains no label. No labels for this class will be loaded.",
                cls.iri
            )
            return None
        if len(labels) > 1:
            self.log.warning(
                "OWLClass %s contains more than one label (including '%s'). "
                "No labels for this class will be loaded.",
                cls.iri, sorted(labels)[0]
            )
            return None
        return labels.pop()

    def collect_classes(self, classes: Iterable[ThingClass], parents_of) -> None:
        """
        Fill the class maps.

        Args:
            classes: Classes to record
            parents_of: Callable returning the named superclasses of a class
        """
        synonym = self.synonym_property()
        label_count = 0
        synonym_count = 0
        synonymed_class_count = 0

        for cls in classes:
            cls_iri = cls.iri

            label = self.class_label(cls)
            if label is not None:
                self.add_class_label(cls_iri, label)
                label_count += 1

            type_labels = set()
            for parent in parents_of(cls):
                type_labels |= literal_values(parent.label)
            self.add_class_types(cls_iri, type_labels)

            if synonym is not None:
                synonyms = literal_values(synonym[cls])
                if synonyms:
                    self.add_synonyms(cls_iri, synonyms)
                    synonym_count += len(synonyms)
                    synonymed_class_count += 1

            self.add_children(cls_iri, {child.iri for child in cls.subclasses()})

        self.log.debug(
            "Successfully loaded %d labelled classes, and %d synonyms on %d classes, from %s!",
            label_count, synonym_count, synonymed_class_count, self.ontology_iri
        )


class AssertedOntologyLoader(OwlreadyOntologyLoader):
    """
    Loads an ontology considering only asserted axioms when generating class
    labels, types and children.
    """

    def load_ontology(self) -> None:
        self.read_ontology()

        def asserted_parents(cls):
            return [parent for parent in cls.is_a if isinstance(parent, ThingClass)]

        self.collect_classes(self.world.classes(), asserted_parents)


class ReasonedOntologyLoader(OwlreadyOntologyLoader):
    """
    Loads an ontology and classifies it with the HermiT reasoner, giving
    inferred types and children. Obsolete classes are left out.

    Requires a Java runtime.
    """

    def load_ontology(self) -> None:
        self.read_ontology()

        self.log.debug("Trying to create a reasoner over ontology '%s'", self.ontology_uri)
        try:
            sync_reasoner(self.world, infer_property_values=False, debug=0)
        except OwlReadyInconsistentOntologyError as e:
            raise OntologyLoadError(
                f"Once classified, '{self.ontology_iri}' was found to be inconsistent"
            ) from e

        self.log.debug("Checking for unsatisfiable classes...")
        unsatisfiable = list(self.world.inconsistent_classes())
        if unsatisfiable:
            raise OntologyLoadError(
                f"Once classified, unsatisfiable classes were detected in "
                f"'{self.ontology_iri}': {', '.join(sorted(c.iri for c in unsatisfiable))}"
            )
        self.log.debug("Reasoning complete!")

        obsolete = self.world.search_one(iri=OBSOLETE_CLASS_URI)

        def is_obsolete(cls):
            return obsolete is not None and (cls is obsolete or obsolete in cls.ancestors())

        def inferred_parents(cls):
            return [parent for parent in cls.ancestors(include_self=False)
                    if isinstance(parent, ThingClass)]

        classes = []
        for cls in self.world.classes():
            if is_obsolete(cls):
                self.log.debug("Class %s is obsolete, skipping", cls.iri)
                continue
            classes.append(cls)

        self.collect_classes(classes, inferred_parents)
