"""
Pydantic schemas for the JSON hierarchy document.
"""
from typing import Optional
from pydantic import BaseModel

from core.models import HierarchyNode


class HierarchyNodeDocument(BaseModel):
    """
    Scalar fields of one node of the output document.

    Children are nested by the serializer. Every field defaults to its
    "empty" value so that dumping with exclude_defaults leaves out absent
    URIs, empty names and zero sizes.
    """
    uri: Optional[str] = None
    name: Optional[str] = None
    size: int = 0

    @classmethod
    def from_node(cls, node: HierarchyNode) -> 'HierarchyNodeDocument':
        return cls(uri=node.uri, name=node.name or None, size=node.size)
