"""
RedisGraph Client
=================

Stages nodes and edges in memory and creates them on the server with a
single ``CREATE`` statement per commit.

Example:
    graph = RedisGraph("social", "localhost", 6379)

    alice = Node(label="Person", properties={"name": "Alice"})
    bob = Node(label="Person", properties={"name": "Bob"})
    graph.add_node(alice)
    graph.add_node(bob)
    graph.add_edge(Edge(alice, "KNOWS", bob))

    result = await graph.commit()
    print(result.nodes_created)  # 2

    result = await graph.query("MATCH (p:Person) RETURN p.name")

Pending state (``nodes``/``edges``) is guarded by an internal lock, so
staging from several threads is safe. Commands themselves are independent:
no ordering is guaranteed between concurrent dispatches.
"""

import threading
from dataclasses import replace
from typing import Any, Dict, List, Optional

import structlog

from redisgraph_client.client.channel import CommandChannel
from redisgraph_client.client.config import RedisGraphConfig
from redisgraph_client.client.result_set import ResultSet
from redisgraph_client.graph.aliases import random_alias
from redisgraph_client.graph.edge import Edge
from redisgraph_client.graph.node import Node

log = structlog.get_logger()

QUERY_COMMAND = "GRAPH.QUERY"
DELETE_COMMAND = "GRAPH.DELETE"


class RedisGraph:
    """
    Client for one named graph.

    Args:
        graph_id: Name of the graph on the server
        host: Server host, or an existing connection handle exposing
            ``execute_command`` (``falkordb.FalkorDB``, ``redis.Redis``)
        port: Server port
        config: Connection settings; ``host``/``port``/``options`` override it
        replace_nodes: When False, registering a different Node under an
            alias that is already staged raises instead of replacing it
        **options: Forwarded verbatim to the transport (ssl, timeouts, ...)
    """

    def __init__(
        self,
        graph_id: str,
        host: Optional[Any] = None,
        port: Optional[int] = None,
        *,
        config: Optional[RedisGraphConfig] = None,
        replace_nodes: bool = True,
        **options: Any,
    ):
        self.graph_id = graph_id
        self.replace_nodes = replace_nodes

        config = config or RedisGraphConfig()
        if host is not None and not isinstance(host, str):
            self._channel = CommandChannel(connection=host, config=config)
        else:
            if host is not None:
                config = replace(config, host=host)
            if port is not None:
                config = replace(config, port=port)
            if options:
                config = replace(config, options={**config.options, **options})
            self._channel = CommandChannel(config=config)

        self.nodes: Dict[str, Node] = {}
        self.edges: List[Edge] = []
        self._lock = threading.Lock()

        log.info(
            f"RedisGraph initialized - "
            f"host={config.host}:{config.port}, "
            f"graph={graph_id}"
        )

    @property
    def config(self) -> RedisGraphConfig:
        return self._channel.config

    @property
    def has_pending(self) -> bool:
        """True while nodes or edges are staged and not yet committed."""
        return bool(self.nodes or self.edges)

    # ------------------------------------------------------------------
    # Staging
    # ------------------------------------------------------------------

    def add_node(self, node: Node) -> None:
        """
        Stage a node.

        A node without an alias gets a random one, so edges added later can
        reference it. A node staged under an existing alias replaces the
        previous one (or raises, with ``replace_nodes=False``).
        """
        with self._lock:
            if node.get_alias() is None:
                node.set_alias(random_alias())

            alias = node.get_alias()
            previous = self.nodes.get(alias)
            if previous is not None and previous is not node:
                if not self.replace_nodes:
                    raise ValueError(f"Alias {alias!r} is already bound to another node")
                log.warning(f"Replacing staged node with alias {alias!r}")

            self.nodes[alias] = node

    def add_edge(self, edge: Edge) -> None:
        """
        Stage an edge.

        Raises:
            ValueError: if either endpoint's alias is not staged
        """
        with self._lock:
            for role, endpoint in (("source", edge.src_node), ("destination", edge.dest_node)):
                alias = endpoint.get_alias()
                if alias is None or alias not in self.nodes:
                    raise ValueError(f"Edge {role} node {alias!r} is not staged on graph {self.graph_id!r}")

            self.edges.append(edge)

    def clear(self) -> None:
        """Drop every staged node and edge."""
        with self._lock:
            self._clear_unlocked()

    def _clear_unlocked(self) -> None:
        self.nodes = {}
        self.edges = []

    def _build_create_query_unlocked(self) -> str:
        parts = [node.render() for node in self.nodes.values()]
        parts.extend(edge.render() for edge in self.edges)
        return "CREATE " + ",".join(parts)

    def build_create_query(self) -> str:
        """Render the pending state as a CREATE statement without committing it."""
        with self._lock:
            return self._build_create_query_unlocked()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def query(self, query: str) -> ResultSet:
        """
        Execute a Cypher query.

        Args:
            query: Cypher query text

        Returns:
            Decoded ResultSet

        Example:
            result = await graph.query("MATCH (p:Person) RETURN p.name, p.age")
            for record in result.records:
                print(record["p.name"])
        """
        log.debug(f"{QUERY_COMMAND} {self.graph_id}: {query[:100]}")
        reply = await self._channel.send_command(QUERY_COMMAND, self.graph_id, query)
        return ResultSet.from_reply(reply)

    async def commit(self) -> Optional[ResultSet]:
        """
        Create every staged node and edge with one CREATE statement.

        The pending state is cleared before the statement is sent, whatever
        the server answers. If rendering fails nothing is sent and the
        pending state is left untouched. With nothing staged this is a
        no-op returning None.
        """
        with self._lock:
            if not self.nodes and not self.edges:
                log.debug(f"Nothing to commit on graph {self.graph_id}")
                return None

            query = self._build_create_query_unlocked()
            node_count, edge_count = len(self.nodes), len(self.edges)
            self._clear_unlocked()

        log.debug(f"Committing {node_count} nodes and {edge_count} edges to graph {self.graph_id}")
        return await self.query(query)

    async def delete_graph(self) -> ResultSet:
        """
        Delete the whole graph on the server.

        Staged nodes and edges are not touched.

        Returns:
            ResultSet with the deletion statistics
        """
        reply = await self._channel.send_command(DELETE_COMMAND, self.graph_id)
        log.info(f"Deleted graph {self.graph_id}")
        return ResultSet.from_reply(reply)

    async def health_check(self) -> bool:
        """
        Check that the server is reachable and answers queries.

        Returns:
            True if healthy, False otherwise
        """
        try:
            await self.query("RETURN 1")
            return True

        except Exception as e:
            log.error(f"Health check failed: {e}")
            return False

    async def close(self) -> None:
        await self._channel.close()

    async def __aenter__(self) -> "RedisGraph":
        await self._channel.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
