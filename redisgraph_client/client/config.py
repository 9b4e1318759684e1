"""
RedisGraph Configuration
========================

Connection settings for the command channel.

Supports configuration via environment variables for flexible deploys.

Usage:
    from redisgraph_client.client import RedisGraphConfig

    # Default (env vars or default values)
    config = RedisGraphConfig()

    # Explicit override
    config = RedisGraphConfig(host="graph.internal", port=6380, ssl=True)

Environment Variables:
    REDISGRAPH_HOST: Server host (default: localhost)
    REDISGRAPH_PORT: Server port (default: 6379)
    REDISGRAPH_USERNAME: ACL username (default: none)
    REDISGRAPH_PASSWORD: Password (default: none)
    REDISGRAPH_TIMEOUT_MS: Socket timeout in ms (default: 5000)
    REDISGRAPH_SSL: Enable TLS, "1"/"true"/"yes" (default: false)
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


def _get_env_str(key: str, default: str) -> str:
    """Read environment variable as string."""
    return os.environ.get(key, default)


def _get_env_int(key: str, default: int) -> int:
    """Read environment variable as integer."""
    return int(os.environ.get(key, default))


def _get_env_bool(key: str, default: bool) -> bool:
    """Read environment variable as boolean."""
    value = os.environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class RedisGraphConfig:
    """
    Connection settings for the graph server.

    All fields support override from environment variables.

    Attributes:
        host: Server host
        port: Server port
        username: ACL username (optional)
        password: Authentication password (optional)
        timeout_ms: Socket timeout in milliseconds
        ssl: Connect over TLS
        options: Extra keyword arguments forwarded verbatim to the transport
    """
    host: str = field(default_factory=lambda: _get_env_str("REDISGRAPH_HOST", "localhost"))
    port: int = field(default_factory=lambda: _get_env_int("REDISGRAPH_PORT", 6379))
    username: Optional[str] = field(default_factory=lambda: _get_env_str("REDISGRAPH_USERNAME", "") or None)
    password: Optional[str] = field(default_factory=lambda: _get_env_str("REDISGRAPH_PASSWORD", "") or None)
    timeout_ms: int = field(default_factory=lambda: _get_env_int("REDISGRAPH_TIMEOUT_MS", 5000))
    ssl: bool = field(default_factory=lambda: _get_env_bool("REDISGRAPH_SSL", False))
    options: Dict[str, Any] = field(default_factory=dict)

    def to_connection_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``falkordb.FalkorDB``; ``options`` win over the typed fields."""
        kwargs: Dict[str, Any] = {
            "host": self.host,
            "port": self.port,
            "password": self.password,
            "socket_timeout": self.timeout_ms / 1000,
        }
        if self.username:
            kwargs["username"] = self.username
        if self.ssl:
            kwargs["ssl"] = True
        kwargs.update(self.options)
        return kwargs
