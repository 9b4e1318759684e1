"""
Graph Client
============

Command dispatch for the graph server (RedisGraph / FalkorDB protocol).

Components:
- RedisGraph: stages nodes/edges, commits them, runs queries
- CommandChannel: async facade over the synchronous connection
- ResultSet: decoded server reply
- RedisGraphConfig: connection settings

Example:
    from redisgraph_client.client import RedisGraph, RedisGraphConfig

    config = RedisGraphConfig(host="localhost", port=6379)
    async with RedisGraph("social", config=config) as graph:
        result = await graph.query("MATCH (n) RETURN count(n)")
"""

from redisgraph_client.client.channel import CommandChannel
from redisgraph_client.client.config import RedisGraphConfig
from redisgraph_client.client.redis_graph import DELETE_COMMAND, QUERY_COMMAND, RedisGraph
from redisgraph_client.client.result_set import ResultSet

__all__ = [
    "RedisGraph",
    "RedisGraphConfig",
    "CommandChannel",
    "ResultSet",
    "QUERY_COMMAND",
    "DELETE_COMMAND",
]
