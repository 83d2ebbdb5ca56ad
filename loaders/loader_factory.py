"""
Factory for creating loaded ontology loaders.
"""

from pathlib import Path
from typing import Optional, Union

from core.exceptions import OntologyLoadError
from .loader_base import OntologyLoader
from .owl_loaders import AssertedOntologyLoader, ReasonedOntologyLoader


def create_ontology_loader(
    ontology_uri: str,
    ontology_file: Optional[Union[str, Path]] = None,
    synonym_uri: Optional[str] = None,
    use_reasoning: bool = True
) -> OntologyLoader:
    """
    Create and load an ontology loader.

    Args:
        ontology_uri: IRI of the ontology to convert
        ontology_file: Local copy of the ontology, if any
        synonym_uri: Annotation property holding synonyms
        use_reasoning: Classify with HermiT (True) or use asserted axioms only

    Returns:
        Loader with its class maps populated

    Raises:
        OntologyLoadError: If the ontology cannot be loaded or classified
    """
    loader_class = ReasonedOntologyLoader if use_reasoning else AssertedOntologyLoader
    loader = loader_class(ontology_uri, ontology_file=ontology_file, synonym_uri=synonym_uri)

    try:
        return loader.load()
    except OntologyLoadError:
        raise
    except Exception as e:
        raise OntologyLoadError(f"Failed to load ontology '{ontology_uri}': {e}") from e
