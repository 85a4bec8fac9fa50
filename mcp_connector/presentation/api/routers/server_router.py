"""
Server Router - Endpoint for registering MCP server records.
"""

from fastapi import APIRouter

from mcp_connector.application.dtos.connection_dtos import (
    RegisterServerRequest,
    RegisterServerResult,
)
from mcp_connector.presentation.api.dependencies import RegisterServerUseCaseDep

router = APIRouter(prefix="/servers", tags=["servers"])


@router.put(
    "/{server_id}",
    response_model=RegisterServerResult,
    summary="Register a server",
)
async def register_server(
    server_id: str,
    request: RegisterServerRequest,
    use_case: RegisterServerUseCaseDep,
):
    return await use_case.execute(server_id, request)
