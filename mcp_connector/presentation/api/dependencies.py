"""
Dependency Injection Configuration.

This module wires together all the concrete implementations
following Clean Architecture principles.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from mcp_connector.infrastructure.config.settings import Settings, get_settings
from mcp_connector.infrastructure.repositories.redis_base import RedisRepository
from mcp_connector.infrastructure.repositories.redis_connection_repository import (
    RedisConnectionRepository,
)
from mcp_connector.infrastructure.repositories.redis_server_repository import (
    RedisServerRepository,
)
from mcp_connector.infrastructure.repositories.redis_tool_repository import (
    RedisToolRepository,
)
from mcp_connector.infrastructure.mcp.proxy.locator import ServerProxyLocator

from mcp_connector.application.interfaces.i_server_proxy import IServerProxyLocator
from mcp_connector.domain.repositories.i_connection_repository import (
    IConnectionRepository,
)
from mcp_connector.domain.repositories.i_server_repository import IServerRepository
from mcp_connector.domain.repositories.i_tool_repository import IToolRepository

from mcp_connector.application.connection_manager import ConnectionLifecycleManager
from mcp_connector.application.use_cases.register_server import RegisterServerUseCase


# Settings
def get_app_settings() -> Settings:
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


# Server Proxy Locator (one per process, so each server keeps one proxy)
@lru_cache
def _proxy_locator(base_url: str, session_timeout_seconds: float) -> ServerProxyLocator:
    return ServerProxyLocator(
        base_url=base_url,
        session_timeout_seconds=session_timeout_seconds,
    )


def get_proxy_locator(settings: SettingsDep) -> IServerProxyLocator:
    return _proxy_locator(settings.proxy_host, settings.mcp_session_timeout_seconds)


ProxyLocatorDep = Annotated[IServerProxyLocator, Depends(get_proxy_locator)]


# Repositories (shared per Redis URL, closed on shutdown)
@lru_cache
def _repositories(redis_url: str) -> dict[str, RedisRepository]:
    return {
        "servers": RedisServerRepository(redis_url=redis_url),
        "connections": RedisConnectionRepository(redis_url=redis_url),
        "tools": RedisToolRepository(redis_url=redis_url),
    }


async def close_repositories() -> None:
    for repository in _repositories(get_settings().redis_url).values():
        await repository.close()


def get_connection_repository(settings: SettingsDep) -> IConnectionRepository:
    return _repositories(settings.redis_url)["connections"]


ConnectionRepositoryDep = Annotated[
    IConnectionRepository, Depends(get_connection_repository)
]


def get_server_repository(settings: SettingsDep) -> IServerRepository:
    return _repositories(settings.redis_url)["servers"]


ServerRepositoryDep = Annotated[IServerRepository, Depends(get_server_repository)]


def get_tool_repository(settings: SettingsDep) -> IToolRepository:
    return _repositories(settings.redis_url)["tools"]


ToolRepositoryDep = Annotated[IToolRepository, Depends(get_tool_repository)]


# Connection Lifecycle Manager
def get_connection_manager(
    connection_repository: ConnectionRepositoryDep,
    server_repository: ServerRepositoryDep,
    tool_repository: ToolRepositoryDep,
    proxy_locator: ProxyLocatorDep,
) -> ConnectionLifecycleManager:
    return ConnectionLifecycleManager(
        connection_repository=connection_repository,
        server_repository=server_repository,
        tool_repository=tool_repository,
        proxy_locator=proxy_locator,
    )


ConnectionManagerDep = Annotated[
    ConnectionLifecycleManager, Depends(get_connection_manager)
]


# Use Cases
def get_register_server_use_case(
    server_repository: ServerRepositoryDep,
) -> RegisterServerUseCase:
    return RegisterServerUseCase(server_repository=server_repository)


RegisterServerUseCaseDep = Annotated[
    RegisterServerUseCase, Depends(get_register_server_use_case)
]
