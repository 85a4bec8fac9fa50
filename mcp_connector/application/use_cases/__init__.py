from .sync_tool_catalog import ToolCatalogSynchronizer
from .connect_to_server import ConnectToServerUseCase
from .call_tool import CallToolUseCase
from .list_connections import ListConnectionsUseCase
from .get_connection import GetConnectionUseCase
from .disconnect_from_server import DisconnectFromServerUseCase
from .get_server_tools import GetServerToolsUseCase
from .register_server import RegisterServerUseCase

__all__ = [
    "ToolCatalogSynchronizer",
    "ConnectToServerUseCase",
    "CallToolUseCase",
    "ListConnectionsUseCase",
    "GetConnectionUseCase",
    "DisconnectFromServerUseCase",
    "GetServerToolsUseCase",
    "RegisterServerUseCase",
]
