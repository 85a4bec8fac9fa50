"""
Connection Router - Endpoints for the MCP connection lifecycle.

Every endpoint answers 200 with a result object; failures are reported
through `success` and `error`, never through the HTTP status.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body

from mcp_connector.application.dtos.connection_dtos import (
    CallToolResult,
    ConnectRequest,
    ConnectResult,
    ConnectionResult,
    DisconnectResult,
    ListConnectionsResult,
    ServerToolsResult,
)
from mcp_connector.presentation.api.dependencies import ConnectionManagerDep

router = APIRouter(prefix="/connections", tags=["connections"])


@router.post(
    "",
    response_model=ConnectResult,
    response_model_exclude_none=True,
    summary="Connect to an MCP server",
    description="Register the server with its proxy and discover its tools.",
)
async def connect(request: ConnectRequest, manager: ConnectionManagerDep):
    return await manager.connect(
        server_id=request.server_id,
        server_url=request.server_url,
        server_name=request.server_name,
    )


@router.get(
    "",
    response_model=ListConnectionsResult,
    summary="List connections",
    description="The 100 most recent connections, newest first.",
)
async def list_connections(manager: ConnectionManagerDep):
    return await manager.list_connections()


@router.get(
    "/{connection_id}",
    response_model=ConnectionResult,
    summary="Get a connection",
)
async def get_connection(connection_id: str, manager: ConnectionManagerDep):
    return await manager.get_connection(connection_id)


@router.post(
    "/{connection_id}/tools/{tool_name}",
    response_model=CallToolResult,
    summary="Call a tool",
    description="Invoke a tool on a connected server; the body is passed through.",
)
async def call_tool(
    connection_id: str,
    tool_name: str,
    manager: ConnectionManagerDep,
    arguments: Optional[Any] = Body(default=None),
):
    return await manager.call_tool(connection_id, tool_name, arguments)


@router.get(
    "/{connection_id}/tools",
    response_model=ServerToolsResult,
    summary="List stored tools",
    description="Tools stored for the connection's server; the server is not contacted.",
)
async def get_server_tools(connection_id: str, manager: ConnectionManagerDep):
    return await manager.get_server_tools(connection_id)


@router.post(
    "/{connection_id}/disconnect",
    response_model=DisconnectResult,
    summary="Disconnect",
    description="Mark the connection as disconnected. Safe to repeat.",
)
async def disconnect(connection_id: str, manager: ConnectionManagerDep):
    return await manager.disconnect_from_server(connection_id)
