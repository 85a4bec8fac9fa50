import logging
from dataclasses import dataclass

from mcp_connector.domain.repositories.i_connection_repository import (
    IConnectionRepository,
)
from mcp_connector.domain.repositories.i_tool_repository import IToolRepository
from mcp_connector.application import errors
from mcp_connector.application.dtos.connection_dtos import ServerToolsResult, ToolRecord

logger = logging.getLogger(__name__)


@dataclass
class GetServerToolsUseCase:
    """Use case for reading the stored tool catalog of a connection's server."""

    connection_repository: IConnectionRepository
    tool_repository: IToolRepository

    async def execute(self, connection_id: str) -> ServerToolsResult:
        """Return every stored tool row for the connection's server.

        The proxy is not contacted, and the connection may be in any status.
        Rows from repeated connects are all returned.
        """
        try:
            connection = await self.connection_repository.get_by_id(connection_id)
            if connection is None:
                return ServerToolsResult.failure(errors.CONNECTION_NOT_FOUND)

            tools = await self.tool_repository.list_by_server(connection.server_id)
            return ServerToolsResult(
                success=True, tools=[ToolRecord.from_entity(tool) for tool in tools]
            )
        except Exception as e:
            logger.exception("Failed to get tools for %s", connection_id)
            return ServerToolsResult.failure(errors.describe(e))
