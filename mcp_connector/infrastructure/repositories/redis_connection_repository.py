from datetime import datetime
from typing import List, Optional

from mcp_connector.domain.entities.connection import Connection, ConnectionStatus
from mcp_connector.domain.repositories.i_connection_repository import (
    ConnectionListing,
    IConnectionRepository,
)
from mcp_connector.infrastructure.repositories.redis_base import (
    KEY_PREFIX,
    RedisRepository,
    connection_key,
    server_connections_key,
    server_key,
    store_statement,
    without_none,
)

CONNECTIONS_BY_CREATED = f"{KEY_PREFIX}:connections:by_created"

# UPDATE ... WHERE id = ?  (no-op when the row does not exist)
UPDATE_IF_EXISTS = """
if redis.call('EXISTS', KEYS[1]) == 1 then
    redis.call('HSET', KEYS[1], unpack(ARGV))
    return 1
end
return 0
"""

# UPDATE ... SET status = 'error' WHERE server_id = ? AND connection_url = ?
# The connection hashes are addressed from ARGV[1], not declared in KEYS, so
# this script needs a single Redis node and is not Redis Cluster safe.
MARK_ERROR_FOR_ENDPOINT = """
local updated = 0
for _, id in ipairs(redis.call('SMEMBERS', KEYS[1])) do
    local key = ARGV[1] .. id
    if redis.call('HGET', key, 'connection_url') == ARGV[2] then
        redis.call('HSET', key, 'status', 'error', 'error_message', ARGV[3])
        updated = updated + 1
    end
end
return updated
"""


class RedisConnectionRepository(RedisRepository, IConnectionRepository):
    """Redis-based repository for connections.

    Each method is one atomic round trip: a MULTI/EXEC pipeline or a Lua
    script. Targets a single Redis node; `mark_error_for_endpoint` touches
    keys its script does not declare, which Redis Cluster rejects.
    """

    @staticmethod
    def serialize_connection(connection: Connection) -> dict[str, str]:
        return without_none(
            {
                "id": connection.id,
                "server_id": connection.server_id,
                "connection_url": connection.connection_url,
                "status": connection.status.value,
                "created_at": connection.created_at.isoformat(),
                "last_ping": (
                    connection.last_ping.isoformat() if connection.last_ping else None
                ),
                "error_message": connection.error_message,
            }
        )

    @staticmethod
    def deserialize_connection(data: dict[str, str]) -> Connection:
        return Connection(
            id=data["id"],
            server_id=data["server_id"],
            connection_url=data["connection_url"],
            status=ConnectionStatus(data["status"]),
            created_at=datetime.fromisoformat(data["created_at"]),
            last_ping=(
                datetime.fromisoformat(data["last_ping"])
                if data.get("last_ping")
                else None
            ),
            error_message=data.get("error_message"),
        )

    async def _update(self, connection_id: str, **fields: str) -> None:
        script = await self._script(UPDATE_IF_EXISTS)
        args = [item for pair in fields.items() for item in pair]
        await script(keys=[connection_key(connection_id)], args=args)

    @store_statement
    async def add(self, connection: Connection) -> None:
        """Insert a new connection row."""
        client = await self._get_client()
        async with client.pipeline(transaction=True) as pipe:
            pipe.hset(
                connection_key(connection.id),
                mapping=self.serialize_connection(connection),
            )
            pipe.zadd(
                CONNECTIONS_BY_CREATED,
                {connection.id: connection.created_at.timestamp()},
            )
            pipe.sadd(server_connections_key(connection.server_id), connection.id)
            await pipe.execute()

    @store_statement
    async def get_by_id(self, connection_id: str) -> Optional[Connection]:
        """Retrieve a connection by its ID."""
        client = await self._get_client()
        data = await client.hgetall(connection_key(connection_id))
        if data:
            return self.deserialize_connection(data)
        return None

    @store_statement
    async def mark_connected(self, connection_id: str, last_ping: datetime) -> None:
        await self._update(
            connection_id,
            status=ConnectionStatus.CONNECTED.value,
            last_ping=last_ping.isoformat(),
        )

    @store_statement
    async def touch(self, connection_id: str, last_ping: datetime) -> None:
        await self._update(connection_id, last_ping=last_ping.isoformat())

    @store_statement
    async def mark_disconnected(self, connection_id: str) -> None:
        await self._update(connection_id, status=ConnectionStatus.DISCONNECTED.value)

    @store_statement
    async def mark_error_for_endpoint(
        self, server_id: str, connection_url: str, error_message: str
    ) -> None:
        script = await self._script(MARK_ERROR_FOR_ENDPOINT)
        await script(
            keys=[server_connections_key(server_id)],
            args=[connection_key(""), connection_url, error_message],
        )

    @store_statement
    async def list_recent(self, limit: int = 100) -> List[ConnectionListing]:
        """List the newest connections first, joined with their servers."""
        client = await self._get_client()

        connection_ids = await client.zrevrange(CONNECTIONS_BY_CREATED, 0, limit - 1)
        if not connection_ids:
            return []

        async with client.pipeline(transaction=False) as pipe:
            for cid in connection_ids:
                pipe.hgetall(connection_key(cid))
            rows = await pipe.execute()

        connections = [self.deserialize_connection(row) for row in rows if row]

        server_ids = list(dict.fromkeys(c.server_id for c in connections))
        async with client.pipeline(transaction=False) as pipe:
            for sid in server_ids:
                pipe.hgetall(server_key(sid))
            server_rows = await pipe.execute()
        servers = dict(zip(server_ids, server_rows))

        return [
            ConnectionListing(
                connection=c,
                server_name=servers[c.server_id].get("name"),
                server_description=servers[c.server_id].get("description"),
            )
            for c in connections
        ]
