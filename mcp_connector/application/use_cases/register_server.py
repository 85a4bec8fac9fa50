import logging
from dataclasses import dataclass

from mcp_connector.domain.entities.server import Server
from mcp_connector.domain.repositories.i_server_repository import IServerRepository
from mcp_connector.application import errors
from mcp_connector.application.dtos.connection_dtos import (
    RegisterServerRequest,
    RegisterServerResult,
)

logger = logging.getLogger(__name__)


@dataclass
class RegisterServerUseCase:
    """Use case for writing a server record."""

    server_repository: IServerRepository

    async def execute(
        self, server_id: str, request: RegisterServerRequest
    ) -> RegisterServerResult:
        try:
            await self.server_repository.save(
                Server(id=server_id, name=request.name, description=request.description)
            )
            return RegisterServerResult(success=True, server_id=server_id)
        except Exception as e:
            logger.exception("Failed to register server %s", server_id)
            return RegisterServerResult.failure(errors.describe(e))
