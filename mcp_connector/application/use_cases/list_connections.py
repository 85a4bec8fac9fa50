import logging
from dataclasses import dataclass

from mcp_connector.domain.repositories.i_connection_repository import (
    IConnectionRepository,
)
from mcp_connector.application import errors
from mcp_connector.application.dtos.connection_dtos import (
    ConnectionRecord,
    ListConnectionsResult,
)

logger = logging.getLogger(__name__)

LIST_LIMIT = 100


@dataclass
class ListConnectionsUseCase:
    """Use case for listing the most recent connections."""

    connection_repository: IConnectionRepository

    async def execute(self) -> ListConnectionsResult:
        try:
            listings = await self.connection_repository.list_recent(limit=LIST_LIMIT)
            return ListConnectionsResult(
                success=True,
                connections=[ConnectionRecord.from_listing(item) for item in listings],
            )
        except Exception as e:
            logger.exception("Failed to list connections")
            return ListConnectionsResult.failure(errors.describe(e))
