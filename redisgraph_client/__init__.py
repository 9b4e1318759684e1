"""
redisgraph-client
=================

Client for graph databases speaking the RedisGraph command protocol
(RedisGraph, FalkorDB).

Quick Start:
    from redisgraph_client import RedisGraph, Node, Edge

    graph = RedisGraph("social", "localhost", 6379)

    alice = Node(alias="a", label="Person", properties={"name": "Alice", "age": 30})
    bob = Node(alias="b", label="Person", properties={"name": "Bob"})
    graph.add_node(alice)
    graph.add_node(bob)
    graph.add_edge(Edge(alice, "KNOWS", bob, {"since": 2020}))

    # CREATE (a:Person {name: "Alice", age: 30}),(b:Person {name: "Bob"}),
    #        (a)-[:KNOWS {since: 2020}]->(b)
    result = await graph.commit()

    result = await graph.query("MATCH (p:Person) RETURN p.name")
    await graph.delete_graph()

Components:
- graph: Node, Edge, property literal rendering, alias generation
- client: RedisGraph, CommandChannel, ResultSet, RedisGraphConfig
"""

__version__ = "0.1.0"

from redisgraph_client.client import CommandChannel, RedisGraph, RedisGraphConfig, ResultSet
from redisgraph_client.graph import Edge, Node, random_alias

__all__ = [
    # Client
    "RedisGraph",
    "RedisGraphConfig",
    "CommandChannel",
    "ResultSet",
    # Graph model
    "Node",
    "Edge",
    "random_alias",
]
