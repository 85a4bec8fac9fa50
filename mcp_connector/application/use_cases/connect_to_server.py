import logging
from dataclasses import dataclass
from typing import Callable

from mcp_connector.domain.entities.connection import Connection, utcnow
from mcp_connector.domain.repositories.i_connection_repository import (
    IConnectionRepository,
)
from mcp_connector.domain.value_objects.identifier import generate_id
from mcp_connector.application import errors
from mcp_connector.application.interfaces.i_server_proxy import IServerProxyLocator
from mcp_connector.application.dtos.connection_dtos import ConnectRequest, ConnectResult
from mcp_connector.application.use_cases.sync_tool_catalog import (
    ToolCatalogSynchronizer,
)

logger = logging.getLogger(__name__)


@dataclass
class ConnectToServerUseCase:
    """Use case for connecting to an MCP server through its proxy."""

    connection_repository: IConnectionRepository
    proxy_locator: IServerProxyLocator
    tool_catalog: ToolCatalogSynchronizer
    id_factory: Callable[[], str] = generate_id

    async def execute(self, request: ConnectRequest) -> ConnectResult:
        """Connect to a server and discover its tools.

        1. Record the attempt as a `connecting` connection
        2. Resolve the server's proxy
        3. Register the server with the proxy
        4. Discover tools (failure here leaves the catalog empty)
        5. Mark the connection `connected`
        6. Store the discovered tools
        """
        try:
            connection = Connection.start(
                connection_id=self.id_factory(),
                server_id=request.server_id,
                connection_url=request.server_url,
            )
            await self.connection_repository.add(connection)

            proxy = self.proxy_locator.get(request.server_id)

            response = await proxy.fetch(
                "/add-mcp",
                method="POST",
                json={"name": request.server_name, "url": request.server_url},
            )
            if not response.ok:
                return await self._fail(request, errors.PROXY_REGISTRATION_FAILED)

            tools = await self.tool_catalog.fetch(proxy, request.server_name)

            await self.connection_repository.mark_connected(connection.id, utcnow())
            await self.tool_catalog.persist(request.server_id, tools)

            logger.info(
                "Connected to %s (%s) as %s with %d tools",
                request.server_name,
                request.server_id,
                connection.id,
                len(tools),
            )
            return ConnectResult(
                success=True,
                connection_id=connection.id,
                tools=tools,
                server_name=request.server_name,
            )

        except Exception as e:
            logger.exception("Failed to connect to MCP server %s", request.server_id)
            return await self._fail(request, errors.describe(e))

    async def _fail(self, request: ConnectRequest, message: str) -> ConnectResult:
        # Keyed on (server_id, url) rather than the connection ID, so a
        # concurrent attempt against the same endpoint is marked as well.
        try:
            await self.connection_repository.mark_error_for_endpoint(
                request.server_id, request.server_url, message
            )
        except Exception:
            logger.exception(
                "Could not record connection error for %s", request.server_id
            )
        return ConnectResult.failure(message)
