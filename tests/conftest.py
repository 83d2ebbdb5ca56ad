"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


class StubOntologyLoader:
    """Stands in for a loaded OntologyLoader."""

    def __init__(self, children, labels, ontology_iri="http://example.org/onto"):
        self.class_children = children
        self.class_labels = labels
        self.ontology_iri = ontology_iri


@pytest.fixture
def temp_dir(tmp_path):
    """Provide temporary directory for test files."""
    return tmp_path


@pytest.fixture
def grouping_graph():
    """Class graph A -> {B, C}, C -> {D}, labelled so A is 'Root'."""
    children = {
        "A": {"B", "C"},
        "B": set(),
        "C": {"D"},
        "D": set(),
    }
    labels = {"A": "Root", "B": "Bee", "C": "Sea", "D": "Dee"}
    return children, labels


@pytest.fixture
def deep_graph():
    """Class graph of depth 3: R -> {X, Y}, X -> {X1, X2}, X1 -> {X1a}."""
    children = {
        "R": {"X", "Y"},
        "X": {"X1", "X2"},
        "Y": set(),
        "X1": {"X1a"},
        "X2": set(),
        "X1a": set(),
    }
    labels = {uri: uri.lower() for uri in children}
    return children, labels


@pytest.fixture
def stub_loader():
    """Factory for StubOntologyLoader instances."""
    return StubOntologyLoader


@pytest.fixture
def counts_csv(temp_dir):
    """Write a counts table and return its path."""
    def _write(content: str) -> Path:
        path = temp_dir / "counts.csv"
        path.write_text(content, encoding="utf-8")
        return path
    return _write
