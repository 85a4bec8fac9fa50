from .connection_dtos import (
    ToolDescriptor,
    ConnectRequest,
    RegisterServerRequest,
    OperationResult,
    ConnectResult,
    CallToolResult,
    DisconnectResult,
    ConnectionRecord,
    ToolRecord,
    ListConnectionsResult,
    ConnectionResult,
    ServerToolsResult,
    RegisterServerResult,
)

__all__ = [
    "ToolDescriptor",
    "ConnectRequest",
    "RegisterServerRequest",
    "OperationResult",
    "ConnectResult",
    "CallToolResult",
    "DisconnectResult",
    "ConnectionRecord",
    "ToolRecord",
    "ListConnectionsResult",
    "ConnectionResult",
    "ServerToolsResult",
    "RegisterServerResult",
]
