"""
Per-server MCP proxy.

Each ServerProxy is a small FastAPI application holding the upstream MCP
servers registered with it. Discovery and tool calls open an MCP client
session against the upstream for the duration of the request.
"""

import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Any, AsyncIterator, Callable, AsyncContextManager, Optional

from fastapi import Body, FastAPI, HTTPException, status
from pydantic import BaseModel

from mcp import ClientSession
from mcp.client.streamable_http import streamablehttp_client

from mcp_connector.domain.value_objects.proxy_name import ProxyName

logger = logging.getLogger(__name__)

SessionFactory = Callable[[str], AsyncContextManager[ClientSession]]


class AddServerRequest(BaseModel):
    """Body of the registration endpoint."""

    name: str
    url: str


class ServerProxy:
    """Long-lived proxy between the connection manager and MCP servers.

    Routes:
    - POST /add-mcp registers an upstream server by name
    - GET /mcp/{server_name}/tools lists its tools
    - POST /mcp/{server_name}/tools/{tool_name} calls a tool
    """

    def __init__(
        self,
        name: ProxyName,
        session_factory: Optional[SessionFactory] = None,
        session_timeout_seconds: float = 30.0,
    ):
        self.name = name
        self._servers: dict[str, str] = {}
        self._session_timeout = timedelta(seconds=session_timeout_seconds)
        self._session_factory = session_factory or self._connect_to_server
        self.app = self._create_app()

    @property
    def registered_servers(self) -> dict[str, str]:
        return dict(self._servers)

    @asynccontextmanager
    async def _connect_to_server(self, url: str) -> AsyncIterator[ClientSession]:
        """Context manager for an initialized upstream session."""
        async with streamablehttp_client(url=url, timeout=self._session_timeout) as (
            read,
            write,
            _,
        ):
            async with ClientSession(read, write) as session:
                await session.initialize()
                yield session

    def _resolve(self, server_name: str) -> str:
        url = self._servers.get(server_name)
        if url is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"MCP server {server_name} is not registered",
            )
        return url

    async def add_server(self, name: str, url: str) -> None:
        """Register an upstream after proving it completes the handshake."""
        async with self._session_factory(url):
            pass
        self._servers[name] = url
        logger.info("Proxy %s registered %s at %s", self.name, name, url)

    async def list_tools(self, server_name: str) -> list[dict[str, Any]]:
        url = self._resolve(server_name)
        async with self._session_factory(url) as session:
            result = await session.list_tools()
        return [
            tool.model_dump(mode="json", by_alias=True, exclude_none=True)
            for tool in result.tools
        ]

    async def call_tool(
        self, server_name: str, tool_name: str, arguments: dict[str, Any]
    ) -> dict[str, Any]:
        url = self._resolve(server_name)
        async with self._session_factory(url) as session:
            result = await session.call_tool(tool_name, arguments)
        return result.model_dump(mode="json", by_alias=True, exclude_none=True)

    def _create_app(self) -> FastAPI:
        app = FastAPI(title=f"MCP proxy {self.name}")

        @app.post("/add-mcp")
        async def add_mcp(request: AddServerRequest):
            try:
                await self.add_server(request.name, request.url)
            except Exception as e:
                logger.warning("Proxy %s could not reach %s: %s", self.name, request.url, e)
                raise HTTPException(
                    status_code=status.HTTP_502_BAD_GATEWAY,
                    detail=f"Could not connect to {request.name}",
                )
            return {"name": request.name, "url": request.url}

        @app.get("/mcp/{server_name}/tools")
        async def list_tools(server_name: str):
            self._resolve(server_name)
            try:
                tools = await self.list_tools(server_name)
            except Exception as e:
                logger.warning("Tool listing on %s failed: %s", server_name, e)
                raise HTTPException(
                    status_code=status.HTTP_502_BAD_GATEWAY,
                    detail=f"Could not list tools of {server_name}",
                )
            return {"tools": tools}

        @app.post("/mcp/{server_name}/tools/{tool_name}")
        async def call_tool(
            server_name: str,
            tool_name: str,
            arguments: Optional[dict[str, Any]] = Body(default=None),
        ):
            self._resolve(server_name)
            try:
                return await self.call_tool(server_name, tool_name, arguments or {})
            except Exception as e:
                logger.warning("Tool %s on %s failed: %s", tool_name, server_name, e)
                raise HTTPException(
                    status_code=status.HTTP_502_BAD_GATEWAY,
                    detail=f"Tool {tool_name} failed",
                )

        return app
