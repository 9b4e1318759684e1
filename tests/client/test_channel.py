"""
Test Command Channel
====================

Unit tests for command dispatch over a mocked connection.
"""

import pytest
from unittest.mock import MagicMock, patch

from redisgraph_client.client import CommandChannel, RedisGraphConfig


class TestCommandChannel:
    """Test dispatch through a supplied connection."""

    @pytest.mark.asyncio
    async def test_send_command_forwards_positional_args(self, mock_connection, create_reply):
        channel = CommandChannel(connection=mock_connection)

        reply = await channel.send_command("GRAPH.QUERY", "social", "RETURN 1")

        assert reply == create_reply
        mock_connection.execute_command.assert_called_once_with("GRAPH.QUERY", "social", "RETURN 1")

    @pytest.mark.asyncio
    async def test_errors_propagate_unchanged(self, mock_connection):
        error = ConnectionError("connection refused")
        mock_connection.execute_command.side_effect = error
        channel = CommandChannel(connection=mock_connection)

        with pytest.raises(ConnectionError) as exc_info:
            await channel.send_command("GRAPH.QUERY", "social", "RETURN 1")

        assert exc_info.value is error
        assert mock_connection.execute_command.call_count == 1

    @pytest.mark.asyncio
    async def test_close_leaves_borrowed_connection_open(self, mock_connection):
        channel = CommandChannel(connection=mock_connection)

        with patch("redisgraph_client.client.channel.FalkorDB") as falkordb_cls:
            await channel.close()
            await channel.send_command("GRAPH.QUERY", "social", "RETURN 1")

        assert channel.connected
        mock_connection.close.assert_not_called()
        mock_connection.execute_command.assert_called_once_with("GRAPH.QUERY", "social", "RETURN 1")
        falkordb_cls.assert_not_called()


class TestLazyConnection:
    """Test connection creation from config."""

    def test_not_connected_until_first_use(self):
        with patch("redisgraph_client.client.channel.FalkorDB") as falkordb_cls:
            channel = CommandChannel(config=RedisGraphConfig(host="h", port=7))

            assert not channel.connected
            falkordb_cls.assert_not_called()

    @pytest.mark.asyncio
    async def test_connection_created_once_from_config(self):
        config = RedisGraphConfig(host="h", port=7, password="pw", timeout_ms=2000, options={"ssl": True})

        with patch("redisgraph_client.client.channel.FalkorDB") as falkordb_cls:
            db = falkordb_cls.return_value
            db.execute_command = MagicMock(return_value="OK")
            channel = CommandChannel(config=config)

            await channel.send_command("GRAPH.QUERY", "g", "RETURN 1")
            await channel.send_command("GRAPH.QUERY", "g", "RETURN 2")

        falkordb_cls.assert_called_once_with(**config.to_connection_kwargs())
        assert db.execute_command.call_count == 2
        assert channel.connected

    @pytest.mark.asyncio
    async def test_connect_is_idempotent(self):
        with patch("redisgraph_client.client.channel.FalkorDB") as falkordb_cls:
            channel = CommandChannel(config=RedisGraphConfig())

            await channel.connect()
            await channel.connect()

        falkordb_cls.assert_called_once()

    @pytest.mark.asyncio
    async def test_close_releases_owned_connection(self):
        with patch("redisgraph_client.client.channel.FalkorDB") as falkordb_cls:
            db = falkordb_cls.return_value
            channel = CommandChannel(config=RedisGraphConfig())
            await channel.connect()

            await channel.close()

        db.connection.close.assert_called_once()
        assert not channel.connected
