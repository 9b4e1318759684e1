"""
In-memory Graph Model
=====================

Nodes, edges and the Cypher literal rendering they share.

Components:
- Node: vertex with alias, label and properties
- Edge: directed relationship between two Nodes
- format_properties / format_value: Cypher map and value literals
- random_alias: alias generator for nodes registered without one
"""

from redisgraph_client.graph.aliases import random_alias
from redisgraph_client.graph.edge import Edge
from redisgraph_client.graph.node import Node
from redisgraph_client.graph.properties import format_key, format_properties, format_value

__all__ = [
    "Node",
    "Edge",
    "format_key",
    "format_properties",
    "format_value",
    "random_alias",
]
