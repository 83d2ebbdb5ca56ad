"""
Unit tests for hierarchy.serializer and hierarchy.schemas modules.
"""
import json

import pytest
from core.exceptions import SerializationError
from core.models import HierarchyNode
from hierarchy import (
    HierarchyNodeDocument,
    OntologyHierarchyBuilder,
    convert_hierarchy_to_json,
    save_json,
)


class TestConvertHierarchyToJson:
    """Tests for convert_hierarchy_to_json function."""

    def test_empty_children_and_zero_size_omitted(self):
        """Test a bare node has neither children nor size keys."""
        document = json.loads(convert_hierarchy_to_json(HierarchyNode(uri="a", name="A")))

        assert document == {"uri": "a", "name": "A"}

    def test_synthetic_node_has_no_uri(self):
        """Test a node without IRI serializes without a uri key."""
        node = HierarchyNode.aggregate(HierarchyNode(uri="p", name="Root"), 4)

        document = json.loads(convert_hierarchy_to_json(node))

        assert document == {"name": "Other Root", "size": 4}

    def test_unlabelled_node_has_no_name(self):
        """Test an empty label is left out."""
        document = json.loads(convert_hierarchy_to_json(HierarchyNode(uri="a", size=1)))

        assert document == {"uri": "a", "size": 1}

    def test_nested_rules_apply(self, grouping_graph):
        """Test the omission rules hold for nested children."""
        children, labels = grouping_graph
        root = OntologyHierarchyBuilder(min_size=2).build(children, labels, "http://onto")

        document = json.loads(convert_hierarchy_to_json(root))

        assert document == {
            "uri": "A",
            "name": "Root",
            "children": [{"name": "Other Root", "size": 2}],
            "size": 2,
        }

    def test_only_known_fields(self, deep_graph):
        """Test no fields beyond uri, name, children and size appear."""
        children, labels = deep_graph
        root = OntologyHierarchyBuilder().build(children, labels, "http://onto")

        stack = [json.loads(convert_hierarchy_to_json(root))]
        while stack:
            document = stack.pop()
            assert set(document) <= {"uri", "name", "children", "size"}
            stack.extend(document.get("children", []))

    def test_indent(self):
        """Test pretty printing is optional and does not change the document."""
        root = OntologyHierarchyBuilder(min_size=2).build(
            {"A": {"B", "C"}, "B": set(), "C": {"D"}, "D": set()}, {"A": "Root"}, "http://onto"
        )

        compact = convert_hierarchy_to_json(root)
        pretty = convert_hierarchy_to_json(root, indent=2)

        assert "\n" not in compact
        assert "\n" in pretty
        assert json.loads(pretty) == json.loads(compact)

    def test_non_ascii_names_kept(self):
        """Test labels are written as UTF-8 text, not escaped."""
        text = convert_hierarchy_to_json(HierarchyNode(uri="a", name="Ménière's disease"))

        assert "Ménière" in text
        assert json.loads(text)["name"] == "Ménière's disease"

    def test_deep_chain(self):
        """Test a chain far deeper than the recursion limit serializes."""
        depth = 5000
        root = HierarchyNode(uri="0", size=1)
        node = root
        for i in range(1, depth):
            child = HierarchyNode(uri=str(i), size=1)
            node.children.append(child)
            node = child

        text = convert_hierarchy_to_json(root)

        assert text.startswith('{"uri":"0","children":[{"uri":"1",')
        assert text.endswith('"uri":"4999","size":1}],"size":1}],"size":1}')
        assert text.count('"uri"') == depth
        assert text.count("{") == text.count("}") == depth

    def test_invalid_node_raises(self):
        """Test a node that cannot be represented raises SerializationError."""
        with pytest.raises(SerializationError):
            convert_hierarchy_to_json(HierarchyNode(uri="a", size="many"))

    def test_document_model(self):
        """Test building the pydantic document from a node."""
        node = HierarchyNode(uri="b", size=2, children=[HierarchyNode(uri="c")])

        document = HierarchyNodeDocument.from_node(node)

        assert document.uri == "b"
        assert document.name is None
        assert document.size == 2
        assert document.model_dump(exclude_defaults=True) == {"uri": "b", "size": 2}


class TestSaveJson:
    """Tests for save_json function."""

    def test_creates_parent_directories(self, temp_dir):
        """Test missing directories are created."""
        path = temp_dir / "out" / "nested" / "tree.json"

        written = save_json('{"name": "x"}', path)

        assert written == path
        assert path.read_text(encoding="utf-8") == '{"name": "x"}'

    def test_write_failure(self, temp_dir):
        """Test an unwritable destination raises SerializationError."""
        with pytest.raises(SerializationError):
            save_json("{}", temp_dir)
