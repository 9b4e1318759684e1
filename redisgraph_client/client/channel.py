"""
Command Channel
===============

Sends graph commands over a single shared connection.

The underlying driver (falkordb-py, on top of redis-py) is synchronous, so
every command runs in the event loop's default executor and the caller
gets an awaitable back. Errors raised by the driver are logged and
re-raised unchanged: no retries, no wrapping.
"""

import asyncio
import threading
from typing import Any, Optional

import structlog
from falkordb import FalkorDB

from redisgraph_client.client.config import RedisGraphConfig

log = structlog.get_logger()


class CommandChannel:
    """
    Async facade over a synchronous command connection.

    The connection is either supplied (any object exposing
    ``execute_command``, e.g. ``falkordb.FalkorDB`` or ``redis.Redis``) or
    created lazily from ``config`` on first use.

    Example:
        channel = CommandChannel(config=RedisGraphConfig(port=6380))
        reply = await channel.send_command("GRAPH.QUERY", "social", "RETURN 1")
    """

    def __init__(self, connection: Optional[Any] = None, config: Optional[RedisGraphConfig] = None):
        self.config = config or RedisGraphConfig()
        self._connection = connection
        self._owns_connection = connection is None
        self._lock = threading.Lock()

    @property
    def connected(self) -> bool:
        return self._connection is not None

    def _connect_sync(self) -> Any:
        """Create the connection if needed (called in executor)."""
        with self._lock:
            if self._connection is None:
                self._connection = FalkorDB(**self.config.to_connection_kwargs())
                log.info(f"Connected to graph server at {self.config.host}:{self.config.port}")
            return self._connection

    async def connect(self) -> None:
        """Establish the connection ahead of the first command."""
        if self.connected:
            log.debug("Command channel already connected")
            return

        loop = asyncio.get_event_loop()
        await loop.run_in_executor(None, self._connect_sync)

    def _send_sync(self, command: str, args: tuple) -> Any:
        connection = self._connect_sync()
        return connection.execute_command(command, *args)

    async def send_command(self, command: str, *args: Any) -> Any:
        """
        Send one command and wait for its raw reply.

        Args:
            command: Command name, e.g. ``GRAPH.QUERY``
            *args: Positional command arguments

        Returns:
            Raw reply from the server
        """
        loop = asyncio.get_event_loop()
        try:
            return await loop.run_in_executor(None, self._send_sync, command, args)
        except Exception as e:
            log.error(f"Command {command} failed: {e}")
            raise

    async def close(self) -> None:
        """Release the connection if this channel created it; a supplied one stays usable."""
        if self._connection is None or not self._owns_connection:
            return

        # FalkorDB keeps the redis client in .connection
        redis_client = getattr(self._connection, "connection", self._connection)
        close = getattr(redis_client, "close", None)
        if close is not None:
            close()
        log.info("Disconnected from graph server")

        self._connection = None
