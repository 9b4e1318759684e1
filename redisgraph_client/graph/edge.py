"""
Graph Edge
==========

A directed relationship between two staged nodes.

Both endpoints are referenced, not copied: the alias a node receives when
it is registered on the client is the one the edge renders.
"""

from typing import Any, Dict, Optional

from redisgraph_client.graph.node import Node
from redisgraph_client.graph.properties import format_properties


class Edge:
    """
    Directed, typed relationship.

    Attributes:
        src_node: Source Node
        relation: Relationship type (optional)
        dest_node: Destination Node
        properties: Property map of the relationship

    Example:
        alice = Node(alias="a")
        bob = Node(alias="b")
        Edge(alice, "KNOWS", bob, {"since": 2020}).render()
        # '(a)-[:KNOWS {since: 2020}]->(b)'
    """

    def __init__(
        self,
        src_node: Node,
        relation: Optional[str],
        dest_node: Node,
        properties: Optional[Dict[str, Any]] = None,
    ):
        if not isinstance(src_node, Node):
            raise TypeError(f"src_node must be a Node, got {type(src_node).__name__}")
        if not isinstance(dest_node, Node):
            raise TypeError(f"dest_node must be a Node, got {type(dest_node).__name__}")

        self.src_node = src_node
        self.relation = relation
        self.dest_node = dest_node
        self.properties = properties

    def render(self) -> str:
        """Render as ``(src)-[[:relation][ {props}]]->(dest)``."""
        inner = ""
        if self.relation is not None:
            inner += ":" + self.relation

        props = format_properties(self.properties)
        if props:
            # Properties follow the relation type inside the same brackets
            inner = f"{inner} {props}" if inner else props

        src = self.src_node.get_alias() or ""
        dest = self.dest_node.get_alias() or ""
        return f"({src})-[{inner}]->({dest})"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Edge({self.src_node.get_alias()!r} -[{self.relation!r}]-> "
            f"{self.dest_node.get_alias()!r})"
        )
