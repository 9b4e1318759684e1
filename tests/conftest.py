"""
redisgraph-client Test Configuration
====================================

Shared fixtures for all tests.
"""

import pytest
from unittest.mock import MagicMock

# Verbose-mode reply to a CREATE statement
CREATE_REPLY = [
    [
        b"Labels added: 1",
        b"Nodes created: 2",
        b"Properties set: 3",
        b"Relationships created: 1",
        b"Query internal execution time: 0.412 milliseconds",
    ]
]

# Verbose-mode reply to MATCH (p:Person) RETURN p.name, p.age
MATCH_REPLY = [
    [b"p.name", b"p.age"],
    [[b"Alice", 30], [b"Bob", 25]],
    [b"Cached execution: 0", b"Query internal execution time: 0.210 milliseconds"],
]

DELETE_REPLY = b"Graph removed, internal execution time: 0.093 milliseconds"


@pytest.fixture
def mock_connection():
    """Mock connection handle exposing execute_command."""
    connection = MagicMock()
    connection.execute_command = MagicMock(return_value=CREATE_REPLY)
    return connection


@pytest.fixture
def graph(mock_connection):
    """RedisGraph bound to the mock connection."""
    from redisgraph_client import RedisGraph

    return RedisGraph("social", mock_connection)


@pytest.fixture
def alice():
    from redisgraph_client import Node

    return Node(alias="a", label="Person", properties={"name": "Alice", "age": 30})


@pytest.fixture
def bob():
    from redisgraph_client import Node

    return Node(alias="b", label="Person", properties={"name": "Bob"})


@pytest.fixture
def create_reply():
    return CREATE_REPLY


@pytest.fixture
def match_reply():
    return MATCH_REPLY


@pytest.fixture
def delete_reply():
    return DELETE_REPLY
