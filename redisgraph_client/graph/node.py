"""
Graph Node
==========

A vertex staged on the client before being created on the server.

Example:
    node = Node(alias="a", label="Person", properties={"name": "Alice", "age": 30})
    node.render()  # '(a:Person {name: "Alice", age: 30})'
"""

from typing import Any, Dict, Optional

from redisgraph_client.graph.properties import format_properties


class Node:
    """
    Labeled, propertied graph vertex.

    Attributes:
        id: Identifier assigned by the server (opaque, never rendered)
        alias: Local name used to reference the node inside a query
        label: Optional label
        properties: Property map, rendered as a Cypher map literal
    """

    def __init__(
        self,
        node_id: Optional[Any] = None,
        alias: Optional[str] = None,
        label: Optional[str] = None,
        properties: Optional[Dict[str, Any]] = None,
    ):
        self.id = node_id
        self.alias = alias
        self.label = label
        self.properties = properties

    def set_alias(self, alias: str) -> None:
        self.alias = alias

    def get_alias(self) -> Optional[str]:
        return self.alias

    def render(self) -> str:
        """Render as ``(alias[:label][ {props}])``."""
        text = "(" + (self.alias or "")

        if self.label is not None:
            text += ":" + self.label

        props = format_properties(self.properties)
        if props:
            text += " " + props

        return text + ")"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Node(alias={self.alias!r}, label={self.label!r}, properties={self.properties!r})"
