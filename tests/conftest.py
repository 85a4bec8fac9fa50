"""
Shared pytest fixtures for all tests.
"""

import json
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

import pytest
from unittest.mock import AsyncMock

from mcp_connector.domain.entities.connection import Connection, ConnectionStatus
from mcp_connector.domain.entities.server import Server
from mcp_connector.domain.entities.tool import Tool
from mcp_connector.domain.repositories.i_connection_repository import (
    ConnectionListing,
    IConnectionRepository,
)
from mcp_connector.domain.repositories.i_server_repository import IServerRepository
from mcp_connector.domain.repositories.i_tool_repository import IToolRepository
from mcp_connector.application.interfaces.i_server_proxy import (
    IServerProxy,
    IServerProxyLocator,
    ProxyResponse,
)


def proxy_response(status_code: int = 200, payload: Any = None) -> ProxyResponse:
    """Build a proxy response carrying a JSON payload."""
    body = json.dumps(payload).encode() if payload is not None else b""
    return ProxyResponse(status_code=status_code, body=body)


# ============================================================================
# Proxy Fakes
# ============================================================================


class FakeServerProxy(IServerProxy):
    """Scripted proxy: answers by (method, path) and records every request."""

    def __init__(self, responses: Optional[Dict[Tuple[str, str], ProxyResponse]] = None):
        self.responses = responses or {}
        self.requests: List[Tuple[str, str, Any]] = []

    async def fetch(self, path: str, method: str = "GET", json: Any = None) -> ProxyResponse:
        self.requests.append((method, path, json))
        return self.responses.get((method, path), proxy_response(404, {"detail": "no route"}))


class FakeProxyLocator(IServerProxyLocator):
    """Locator handing out one FakeServerProxy per server ID."""

    def __init__(self):
        self.proxies: Dict[str, FakeServerProxy] = {}
        self.lookups: List[str] = []

    def get(self, server_id: str) -> FakeServerProxy:
        self.lookups.append(server_id)
        return self.proxies.setdefault(server_id, FakeServerProxy())


def toolserver_routes(tools: List[dict], name: str = "toolserver") -> Dict[Tuple[str, str], ProxyResponse]:
    """Routes of a proxy that registers `name` and lists `tools`."""
    return {
        ("POST", "/add-mcp"): proxy_response(200, {"name": name, "url": "http://x"}),
        ("GET", f"/mcp/{name}/tools"): proxy_response(200, {"tools": tools}),
    }


# ============================================================================
# In-memory Repositories
# ============================================================================


class InMemoryServerRepository(IServerRepository):
    def __init__(self):
        self.rows: Dict[str, Server] = {}

    async def get_by_id(self, server_id: str) -> Optional[Server]:
        return self.rows.get(server_id)

    async def save(self, server: Server) -> None:
        self.rows[server.id] = server


class InMemoryConnectionRepository(IConnectionRepository):
    def __init__(self, servers: Optional[InMemoryServerRepository] = None):
        self.rows: Dict[str, Connection] = {}
        self._servers = servers or InMemoryServerRepository()

    async def add(self, connection: Connection) -> None:
        self.rows[connection.id] = replace(connection)

    async def get_by_id(self, connection_id: str) -> Optional[Connection]:
        row = self.rows.get(connection_id)
        return replace(row) if row else None

    async def mark_connected(self, connection_id: str, last_ping: datetime) -> None:
        if connection_id in self.rows:
            self.rows[connection_id].status = ConnectionStatus.CONNECTED
            self.rows[connection_id].last_ping = last_ping

    async def touch(self, connection_id: str, last_ping: datetime) -> None:
        if connection_id in self.rows:
            self.rows[connection_id].last_ping = last_ping

    async def mark_disconnected(self, connection_id: str) -> None:
        if connection_id in self.rows:
            self.rows[connection_id].status = ConnectionStatus.DISCONNECTED

    async def mark_error_for_endpoint(
        self, server_id: str, connection_url: str, error_message: str
    ) -> None:
        for row in self.rows.values():
            if row.server_id == server_id and row.connection_url == connection_url:
                row.status = ConnectionStatus.ERROR
                row.error_message = error_message

    async def list_recent(self, limit: int = 100) -> List[ConnectionListing]:
        newest = sorted(self.rows.values(), key=lambda c: c.created_at, reverse=True)
        listings = []
        for row in newest[:limit]:
            server = self._servers.rows.get(row.server_id)
            listings.append(
                ConnectionListing(
                    connection=replace(row),
                    server_name=server.name if server else None,
                    server_description=server.description if server else None,
                )
            )
        return listings


class InMemoryToolRepository(IToolRepository):
    def __init__(self):
        self.rows: List[Tool] = []

    async def add(self, tool: Tool) -> None:
        self.rows.append(tool)

    async def list_by_server(self, server_id: str) -> List[Tool]:
        return [tool for tool in self.rows if tool.server_id == server_id]


# ============================================================================
# Entity Fixtures
# ============================================================================


@pytest.fixture
def test_server() -> Server:
    return Server(id="srv1", name="toolserver", description="Test tool server")


@pytest.fixture
def connecting_connection() -> Connection:
    return Connection.start(
        connection_id="conn-1", server_id="srv1", connection_url="http://x"
    )


@pytest.fixture
def connected_connection() -> Connection:
    return Connection(
        id="conn-1",
        server_id="srv1",
        connection_url="http://x",
        status=ConnectionStatus.CONNECTED,
        created_at=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
        last_ping=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_tools() -> List[dict]:
    return [
        {
            "name": "a",
            "description": "First tool",
            "inputSchema": {"type": "object", "properties": {"q": {"type": "string"}}},
        },
        {"name": "b"},
    ]


# ============================================================================
# Mock Repository Fixtures
# ============================================================================


@pytest.fixture
def mock_connection_repository() -> AsyncMock:
    """Mock IConnectionRepository."""
    mock = AsyncMock(spec=IConnectionRepository)
    mock.add.return_value = None
    mock.get_by_id.return_value = None
    mock.mark_connected.return_value = None
    mock.touch.return_value = None
    mock.mark_disconnected.return_value = None
    mock.mark_error_for_endpoint.return_value = None
    mock.list_recent.return_value = []
    return mock


@pytest.fixture
def mock_server_repository() -> AsyncMock:
    """Mock IServerRepository."""
    mock = AsyncMock(spec=IServerRepository)
    mock.get_by_id.return_value = None
    mock.save.return_value = None
    return mock


@pytest.fixture
def mock_tool_repository() -> AsyncMock:
    """Mock IToolRepository."""
    mock = AsyncMock(spec=IToolRepository)
    mock.add.return_value = None
    mock.list_by_server.return_value = []
    return mock


# ============================================================================
# Proxy Fixtures
# ============================================================================


@pytest.fixture
def proxy_locator() -> FakeProxyLocator:
    return FakeProxyLocator()


@pytest.fixture
def id_factory():
    """Deterministic identifiers: id-1, id-2, ..."""
    counter = {"n": 0}

    def _next() -> str:
        counter["n"] += 1
        return f"id-{counter['n']}"

    return _next


# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "e2e: mark test as an end-to-end test"
    )
