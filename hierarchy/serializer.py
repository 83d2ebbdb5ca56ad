"""
JSON rendering of a finished hierarchy.

Output fields per node: uri (omitted for synthetic nodes), name (omitted when
the class has no label), children (omitted when empty) and size (omitted when
zero). Nothing else is emitted.

The document is written with an explicit stack, so hierarchies of any depth
serialize without hitting the interpreter's recursion limit.
"""
import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from core.exceptions import SerializationError
from core.models import HierarchyNode
from .schemas import HierarchyNodeDocument

logger = logging.getLogger(__name__)


def _render(root: HierarchyNode, indent: Optional[int]) -> str:
    if indent is None:
        colon = ":"

        def newline(level: int) -> str:
            return ""
    else:
        colon = ": "

        def newline(level: int) -> str:
            return "\n" + " " * (indent * level)

    parts: List[str] = []
    # entries are literal text or (node, nesting level) still to be written
    stack = [(root, 0)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue

        node, level = item
        fields = HierarchyNodeDocument.from_node(node).model_dump(exclude_defaults=True)
        size = fields.pop('size', None)

        pending = ["{"]
        separator = ""
        for key, value in fields.items():
            pending.append(
                f"{separator}{newline(level + 1)}{json.dumps(key)}{colon}"
                f"{json.dumps(value, ensure_ascii=False)}"
            )
            separator = ","
        if node.children:
            pending.append(f'{separator}{newline(level + 1)}"children"{colon}[')
            for position, child in enumerate(node.children):
                pending.append(("," if position else "") + newline(level + 2))
                pending.append((child, level + 2))
            pending.append(f"{newline(level + 1)}]")
            separator = ","
        if size is not None:
            pending.append(f'{separator}{newline(level + 1)}"size"{colon}{size}')
            separator = ","
        pending.append(newline(level) + "}" if separator else "}")

        stack.extend(reversed(pending))

    return "".join(parts)


def convert_hierarchy_to_json(root: HierarchyNode, indent: Optional[int] = None) -> str:
    """
    Serialize a hierarchy to a JSON string.

    Args:
        root: Root node of the hierarchy
        indent: Optional indentation for pretty printing

    Returns:
        JSON document with the root node at the top level

    Raises:
        SerializationError: If the tree cannot be represented as a document
    """
    try:
        return _render(root, indent)
    except (ValidationError, PydanticSerializationError) as e:
        raise SerializationError(f"Unable to serialize ontology hierarchy to JSON: {e}") from e


def save_json(json_string: str, output_path: Union[str, Path]) -> Path:
    """
    Write a JSON document, creating missing parent directories.

    Args:
        json_string: Serialized hierarchy
        output_path: Destination file

    Returns:
        Path written to

    Raises:
        SerializationError: If the file cannot be written
    """
    path = Path(output_path)
    try:
        if not path.parent.exists():
            logger.info("Creating output file directory '%s'", path.parent.resolve())
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json_string, encoding='utf-8')
    except OSError as e:
        raise SerializationError(f"Unable to write JSON to {path}: {e}") from e

    logger.info("Wrote ontology hierarchy JSON to %s", path)
    return path
