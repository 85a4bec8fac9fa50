"""
Connection Lifecycle Manager.

Entry point for the connection operations. The manager keeps no state of
its own: every call re-reads the record store and re-resolves the server
proxy, and every call returns a result object instead of raising.
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from mcp_connector.domain.repositories.i_connection_repository import (
    IConnectionRepository,
)
from mcp_connector.domain.repositories.i_server_repository import IServerRepository
from mcp_connector.domain.repositories.i_tool_repository import IToolRepository
from mcp_connector.domain.value_objects.identifier import generate_id
from mcp_connector.application.interfaces.i_server_proxy import IServerProxyLocator
from mcp_connector.application.dtos.connection_dtos import (
    CallToolResult,
    ConnectRequest,
    ConnectResult,
    ConnectionResult,
    DisconnectResult,
    ListConnectionsResult,
    ServerToolsResult,
)
from mcp_connector.application.use_cases import (
    CallToolUseCase,
    ConnectToServerUseCase,
    DisconnectFromServerUseCase,
    GetConnectionUseCase,
    GetServerToolsUseCase,
    ListConnectionsUseCase,
    ToolCatalogSynchronizer,
)


@dataclass
class ConnectionLifecycleManager:
    """Orchestrates connect, call-tool, list, disconnect and tool lookups."""

    connection_repository: IConnectionRepository
    server_repository: IServerRepository
    tool_repository: IToolRepository
    proxy_locator: IServerProxyLocator
    id_factory: Callable[[], str] = generate_id

    _connect: ConnectToServerUseCase = field(init=False, repr=False)
    _call_tool: CallToolUseCase = field(init=False, repr=False)
    _list_connections: ListConnectionsUseCase = field(init=False, repr=False)
    _get_connection: GetConnectionUseCase = field(init=False, repr=False)
    _disconnect: DisconnectFromServerUseCase = field(init=False, repr=False)
    _get_server_tools: GetServerToolsUseCase = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._connect = ConnectToServerUseCase(
            connection_repository=self.connection_repository,
            proxy_locator=self.proxy_locator,
            tool_catalog=ToolCatalogSynchronizer(
                tool_repository=self.tool_repository,
                id_factory=self.id_factory,
            ),
            id_factory=self.id_factory,
        )
        self._call_tool = CallToolUseCase(
            connection_repository=self.connection_repository,
            server_repository=self.server_repository,
            proxy_locator=self.proxy_locator,
        )
        self._list_connections = ListConnectionsUseCase(
            connection_repository=self.connection_repository
        )
        self._get_connection = GetConnectionUseCase(
            connection_repository=self.connection_repository
        )
        self._disconnect = DisconnectFromServerUseCase(
            connection_repository=self.connection_repository
        )
        self._get_server_tools = GetServerToolsUseCase(
            connection_repository=self.connection_repository,
            tool_repository=self.tool_repository,
        )

    async def connect(
        self, server_id: str, server_url: str, server_name: str
    ) -> ConnectResult:
        return await self._connect.execute(
            ConnectRequest(
                server_id=server_id, server_url=server_url, server_name=server_name
            )
        )

    async def call_tool(
        self, connection_id: str, tool_name: str, arguments: Any
    ) -> CallToolResult:
        return await self._call_tool.execute(connection_id, tool_name, arguments)

    async def list_connections(self) -> ListConnectionsResult:
        return await self._list_connections.execute()

    async def get_connection(self, connection_id: str) -> ConnectionResult:
        return await self._get_connection.execute(connection_id)

    async def disconnect_from_server(self, connection_id: str) -> DisconnectResult:
        return await self._disconnect.execute(connection_id)

    async def get_server_tools(self, connection_id: str) -> ServerToolsResult:
        return await self._get_server_tools.execute(connection_id)
