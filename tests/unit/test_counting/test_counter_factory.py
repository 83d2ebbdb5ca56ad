"""
Unit tests for counting.counter_factory module.
"""
import pytest
from counting import (
    NodeCounterFactory,
    TreeSizeNodeCounter,
    CsvNodeCounter,
    ZoomaNodeCounter,
)


class TestNodeCounterFactory:
    """Tests for NodeCounterFactory."""

    def test_tree(self):
        """Test the structural counter is the default."""
        assert isinstance(NodeCounterFactory.create_counter(), TreeSizeNodeCounter)

    def test_csv(self, temp_dir):
        """Test creating a CSV counter."""
        counter = NodeCounterFactory.create_counter('csv', csv_path=temp_dir / "c.csv")

        assert isinstance(counter, CsvNodeCounter)
        assert not counter.initialized

    def test_csv_requires_path(self):
        """Test the CSV counter needs a path."""
        with pytest.raises(ValueError, match="csv_path"):
            NodeCounterFactory.create_counter('csv')

    def test_zooma_options(self):
        """Test ZOOMA options are passed through."""
        counter = NodeCounterFactory.create_counter(
            ' Zooma ', datasource="http://example.org/src",
            query_url="http://zooma.test/query", timeout=5
        )

        assert isinstance(counter, ZoomaNodeCounter)
        assert counter.datasource == "http://example.org/src"
        assert counter.query_url == "http://zooma.test/query"
        assert counter.timeout == 5

    def test_unsupported(self):
        """Test unknown kinds are rejected."""
        with pytest.raises(ValueError, match="Unsupported node counter"):
            NodeCounterFactory.create_counter('sparql')

    def test_supported_list(self):
        """Test the list of supported counters."""
        assert NodeCounterFactory.get_supported_counters() == ['tree', 'csv', 'zooma']
