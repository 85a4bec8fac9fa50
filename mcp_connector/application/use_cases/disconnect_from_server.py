import logging
from dataclasses import dataclass

from mcp_connector.domain.repositories.i_connection_repository import (
    IConnectionRepository,
)
from mcp_connector.application import errors
from mcp_connector.application.dtos.connection_dtos import DisconnectResult

logger = logging.getLogger(__name__)


@dataclass
class DisconnectFromServerUseCase:
    """Use case for marking a connection as disconnected.

    This is bookkeeping only: the proxy and its upstream registration are
    left in place.
    """

    connection_repository: IConnectionRepository

    async def execute(self, connection_id: str) -> DisconnectResult:
        try:
            await self.connection_repository.mark_disconnected(connection_id)
            return DisconnectResult(success=True, connection_id=connection_id)
        except Exception as e:
            logger.exception("Failed to disconnect %s", connection_id)
            return DisconnectResult.failure(errors.describe(e))
