from typing import Optional

from mcp_connector.domain.entities.server import Server
from mcp_connector.domain.repositories.i_server_repository import IServerRepository
from mcp_connector.infrastructure.repositories.redis_base import (
    RedisRepository,
    server_key,
    store_statement,
    without_none,
)


class RedisServerRepository(RedisRepository, IServerRepository):
    """Redis-based repository for servers."""

    @staticmethod
    def serialize_server(server: Server) -> dict[str, str]:
        return without_none(
            {
                "id": server.id,
                "name": server.name,
                "description": server.description,
            }
        )

    @staticmethod
    def deserialize_server(data: dict[str, str]) -> Server:
        return Server(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
        )

    @store_statement
    async def get_by_id(self, server_id: str) -> Optional[Server]:
        """Retrieve a server by its ID."""
        client = await self._get_client()
        data = await client.hgetall(server_key(server_id))
        if data:
            return self.deserialize_server(data)
        return None

    @store_statement
    async def save(self, server: Server) -> None:
        """Persist a server."""
        client = await self._get_client()
        await client.hset(server_key(server.id), mapping=self.serialize_server(server))
