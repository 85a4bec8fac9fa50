import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from mcp_connector.domain.entities.connection import utcnow
from mcp_connector.domain.repositories.i_connection_repository import (
    IConnectionRepository,
)
from mcp_connector.domain.repositories.i_server_repository import IServerRepository
from mcp_connector.application import errors
from mcp_connector.application.interfaces.i_server_proxy import IServerProxyLocator
from mcp_connector.application.dtos.connection_dtos import CallToolResult

logger = logging.getLogger(__name__)


@dataclass
class CallToolUseCase:
    """Use case for invoking a tool on a connected server."""

    connection_repository: IConnectionRepository
    server_repository: IServerRepository
    proxy_locator: IServerProxyLocator

    async def execute(
        self, connection_id: str, tool_name: str, arguments: Any
    ) -> CallToolResult:
        """Relay a tool call and return the proxy's result unmodified.

        Args:
            connection_id: The connection returned by connect
            tool_name: Name of the tool on the server
            arguments: JSON payload forwarded as the request body

        Returns:
            CallToolResult with the raw tool result, or the failure reason
        """
        try:
            connection = await self.connection_repository.get_by_id(connection_id)
            if connection is None:
                return CallToolResult.failure(errors.CONNECTION_NOT_FOUND)

            if not connection.is_connected:
                return CallToolResult.failure(
                    errors.invalid_state(connection.status.value)
                )

            server = await self.server_repository.get_by_id(connection.server_id)
            if server is None:
                return CallToolResult.failure(errors.SERVER_NOT_FOUND)

            proxy = self.proxy_locator.get(connection.server_id)
            response = await proxy.fetch(
                f"/mcp/{quote(server.name, safe='')}/tools/{quote(tool_name, safe='')}",
                method="POST",
                json=arguments,
            )
            if not response.ok:
                logger.warning(
                    "Tool %s on %s failed with status %s",
                    tool_name,
                    server.name,
                    response.status_code,
                )
                return CallToolResult.failure(errors.TOOL_CALL_FAILED)

            result = response.json()

            await self.connection_repository.touch(connection_id, utcnow())

            return CallToolResult(success=True, result=result)

        except Exception as e:
            logger.exception("Failed to call tool %s", tool_name)
            return CallToolResult.failure(errors.describe(e))
