import functools
from typing import Any, Awaitable, Callable, TypeVar

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from mcp_connector.domain.exceptions.domain_exceptions import StoreError

KEY_PREFIX = "mcp"

T = TypeVar("T")


def server_key(server_id: str) -> str:
    return f"{KEY_PREFIX}:server:{server_id}"


def server_connections_key(server_id: str) -> str:
    return f"{KEY_PREFIX}:server:{server_id}:connections"


def server_tools_key(server_id: str) -> str:
    return f"{KEY_PREFIX}:server:{server_id}:tools"


def connection_key(connection_id: str) -> str:
    return f"{KEY_PREFIX}:connection:{connection_id}"


def tool_key(tool_id: str) -> str:
    return f"{KEY_PREFIX}:tool:{tool_id}"


def store_statement(
    func: Callable[..., Awaitable[T]],
) -> Callable[..., Awaitable[T]]:
    """Re-raise Redis failures of a repository method as StoreError."""

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return await func(*args, **kwargs)
        except RedisError as e:
            raise StoreError(f"Record store failure: {e}") from e

    return wrapper


def without_none(mapping: dict[str, Any]) -> dict[str, Any]:
    """Drop unset columns; Redis hashes cannot hold null values."""
    return {key: value for key, value in mapping.items() if value is not None}


class RedisRepository:
    """Shared client handling for the Redis-backed repositories."""

    def __init__(self, redis_url: str):
        self._redis_url = redis_url
        self._client: Any = None
        self._scripts: dict[str, Any] = {}

    async def _get_client(self) -> Any:
        if self._client is None:
            self._client = aioredis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._client

    async def _script(self, source: str) -> Any:
        """Register a Lua script once per client and return it."""
        if source not in self._scripts:
            client = await self._get_client()
            self._scripts[source] = client.register_script(source)
        return self._scripts[source]

    async def close(self) -> None:
        """Close the Redis connection."""
        if self._client:
            await self._client.aclose()
            self._client = None
            self._scripts.clear()
