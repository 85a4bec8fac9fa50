import logging
from dataclasses import dataclass
from typing import Callable, List
from urllib.parse import quote

from mcp_connector.domain.entities.tool import Tool
from mcp_connector.domain.repositories.i_tool_repository import IToolRepository
from mcp_connector.domain.value_objects.identifier import generate_id
from mcp_connector.application.interfaces.i_server_proxy import IServerProxy
from mcp_connector.application.dtos.connection_dtos import ToolDescriptor

logger = logging.getLogger(__name__)


@dataclass
class ToolCatalogSynchronizer:
    """Discovers a server's tools through its proxy and stores them.

    Discovery failure is not a connection failure: a non-success response
    from the proxy yields an empty catalog.
    """

    tool_repository: IToolRepository
    id_factory: Callable[[], str] = generate_id

    async def fetch(self, proxy: IServerProxy, server_name: str) -> List[ToolDescriptor]:
        """Ask the proxy for the tools of a registered server."""
        response = await proxy.fetch(f"/mcp/{quote(server_name, safe='')}/tools")
        if not response.ok:
            logger.warning(
                "Tool discovery for %s failed with status %s, continuing without tools",
                server_name,
                response.status_code,
            )
            return []

        data = response.json()
        if not isinstance(data, dict):
            return []
        return [ToolDescriptor.model_validate(tool) for tool in data.get("tools") or []]

    async def persist(self, server_id: str, tools: List[ToolDescriptor]) -> List[Tool]:
        """Insert one tool row per descriptor.

        Rows from earlier connects are kept as they are.
        """
        stored = []
        for descriptor in tools:
            tool = Tool(
                id=self.id_factory(),
                server_id=server_id,
                tool_name=descriptor.name,
                description=descriptor.description or "",
                input_schema=descriptor.inputSchema or {},
            )
            await self.tool_repository.add(tool)
            stored.append(tool)
        return stored
