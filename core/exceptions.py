"""Errors that abort a conversion run."""


class Owl2JsonError(Exception):
    """Base class for unrecoverable conversion failures."""


class OntologyLoadError(Owl2JsonError):
    """Raised when an ontology cannot be loaded or fails classification."""


class CounterInitializationError(Owl2JsonError):
    """Raised when a node counter cannot acquire its counts."""


class SerializationError(Owl2JsonError):
    """Raised when the hierarchy cannot be rendered or written as JSON."""
