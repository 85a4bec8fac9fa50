import json
from typing import List

from mcp_connector.domain.entities.tool import Tool
from mcp_connector.domain.repositories.i_tool_repository import IToolRepository
from mcp_connector.infrastructure.repositories.redis_base import (
    RedisRepository,
    server_tools_key,
    store_statement,
    tool_key,
)


class RedisToolRepository(RedisRepository, IToolRepository):
    """Redis-based repository for discovered tools.

    Tool IDs are appended to a per-server list, so repeated connects keep
    every row they inserted.
    """

    @staticmethod
    def serialize_tool(tool: Tool) -> dict[str, str]:
        return {
            "id": tool.id,
            "server_id": tool.server_id,
            "tool_name": tool.tool_name,
            "description": tool.description,
            "input_schema": json.dumps(tool.input_schema),
        }

    @staticmethod
    def deserialize_tool(data: dict[str, str]) -> Tool:
        return Tool(
            id=data["id"],
            server_id=data["server_id"],
            tool_name=data["tool_name"],
            description=data.get("description", ""),
            input_schema=json.loads(data.get("input_schema") or "{}"),
        )

    @store_statement
    async def add(self, tool: Tool) -> None:
        client = await self._get_client()
        async with client.pipeline(transaction=True) as pipe:
            pipe.hset(tool_key(tool.id), mapping=self.serialize_tool(tool))
            pipe.rpush(server_tools_key(tool.server_id), tool.id)
            await pipe.execute()

    @store_statement
    async def list_by_server(self, server_id: str) -> List[Tool]:
        client = await self._get_client()

        tool_ids = await client.lrange(server_tools_key(server_id), 0, -1)
        if not tool_ids:
            return []

        async with client.pipeline(transaction=False) as pipe:
            for tid in tool_ids:
                pipe.hgetall(tool_key(tid))
            rows = await pipe.execute()

        return [self.deserialize_tool(row) for row in rows if row]
