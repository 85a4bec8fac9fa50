import logging
from dataclasses import dataclass

from mcp_connector.domain.repositories.i_connection_repository import (
    IConnectionRepository,
)
from mcp_connector.application import errors
from mcp_connector.application.dtos.connection_dtos import (
    ConnectionRecord,
    ConnectionResult,
)

logger = logging.getLogger(__name__)


@dataclass
class GetConnectionUseCase:
    """Use case for reading a single connection."""

    connection_repository: IConnectionRepository

    async def execute(self, connection_id: str) -> ConnectionResult:
        try:
            connection = await self.connection_repository.get_by_id(connection_id)
            if connection is None:
                return ConnectionResult.failure(errors.CONNECTION_NOT_FOUND)

            return ConnectionResult(
                success=True, connection=ConnectionRecord.from_entity(connection)
            )
        except Exception as e:
            logger.exception("Failed to get connection %s", connection_id)
            return ConnectionResult.failure(errors.describe(e))
