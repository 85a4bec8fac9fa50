from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_camel

from mcp_connector.domain.entities.connection import Connection
from mcp_connector.domain.entities.tool import Tool
from mcp_connector.domain.repositories.i_connection_repository import (
    ConnectionListing,
)


class CamelModel(BaseModel):
    """Base for request/result envelopes exchanged as camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ToolDescriptor(BaseModel):
    """A tool as reported by the proxy's discovery endpoint.

    Unknown keys are kept so the descriptor passes through uninterpreted.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    description: Optional[str] = None
    inputSchema: Optional[dict[str, Any]] = None


class ConnectRequest(CamelModel):
    """Request DTO for connecting to an MCP server."""

    server_id: str
    server_url: str
    server_name: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "serverId": "srv1",
                "serverUrl": "https://mcp.example.com/mcp",
                "serverName": "toolserver",
            }
        },
    )


class RegisterServerRequest(CamelModel):
    """Request DTO for registering a server record."""

    name: str
    description: Optional[str] = None


class OperationResult(CamelModel):
    """Common envelope: failures carry `success=False` and an error message."""

    success: bool
    error: Optional[str] = None

    @classmethod
    def failure(cls, error: str):
        return cls(success=False, error=error)

    @model_serializer(mode="wrap")
    def _omit_unset_nulls(self, handler):
        # Records nested in a result keep their nulls; only the envelope
        # drops fields that were never filled in.
        data = handler(self)
        for name, info in type(self).model_fields.items():
            if name in self.model_fields_set:
                continue
            for key in (name, info.alias):
                if key in data and data[key] is None:
                    del data[key]
        return data


class ConnectResult(OperationResult):
    connection_id: Optional[str] = None
    tools: Optional[List[ToolDescriptor]] = None
    server_name: Optional[str] = None


class CallToolResult(OperationResult):
    result: Optional[Any] = None


class DisconnectResult(OperationResult):
    connection_id: Optional[str] = None


class ConnectionRecord(BaseModel):
    """A persisted connection, optionally joined with its server."""

    id: str
    server_id: str
    connection_url: str
    status: str
    created_at: datetime
    last_ping: Optional[datetime] = None
    error_message: Optional[str] = None
    server_name: Optional[str] = None
    server_description: Optional[str] = None

    @classmethod
    def from_entity(
        cls,
        connection: Connection,
        server_name: Optional[str] = None,
        server_description: Optional[str] = None,
    ) -> "ConnectionRecord":
        return cls(
            id=connection.id,
            server_id=connection.server_id,
            connection_url=connection.connection_url,
            status=connection.status.value,
            created_at=connection.created_at,
            last_ping=connection.last_ping,
            error_message=connection.error_message,
            server_name=server_name,
            server_description=server_description,
        )

    @classmethod
    def from_listing(cls, listing: ConnectionListing) -> "ConnectionRecord":
        return cls.from_entity(
            listing.connection,
            server_name=listing.server_name,
            server_description=listing.server_description,
        )


class ToolRecord(BaseModel):
    """A persisted tool row."""

    id: str
    server_id: str
    tool_name: str
    description: str
    input_schema: dict[str, Any]

    @classmethod
    def from_entity(cls, tool: Tool) -> "ToolRecord":
        return cls(
            id=tool.id,
            server_id=tool.server_id,
            tool_name=tool.tool_name,
            description=tool.description,
            input_schema=tool.input_schema,
        )


class ListConnectionsResult(OperationResult):
    connections: Optional[List[ConnectionRecord]] = None


class ConnectionResult(OperationResult):
    connection: Optional[ConnectionRecord] = None


class ServerToolsResult(OperationResult):
    tools: Optional[List[ToolRecord]] = None


class RegisterServerResult(OperationResult):
    server_id: Optional[str] = None
