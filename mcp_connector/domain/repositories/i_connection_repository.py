from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from ..entities.connection import Connection


@dataclass(frozen=True)
class ConnectionListing:
    """A connection left-joined with its server's name and description."""

    connection: Connection
    server_name: Optional[str] = None
    server_description: Optional[str] = None


class IConnectionRepository(ABC):
    """Abstract repository interface for Connection persistence.

    Every method is a single atomic statement. Updates that match no row
    are no-ops.
    """

    @abstractmethod
    async def add(self, connection: Connection) -> None:
        """Insert a new connection row."""
        pass

    @abstractmethod
    async def get_by_id(self, connection_id: str) -> Optional[Connection]:
        """Retrieve a connection by its ID."""
        pass

    @abstractmethod
    async def mark_connected(self, connection_id: str, last_ping: datetime) -> None:
        """Set status `connected` and stamp last ping."""
        pass

    @abstractmethod
    async def touch(self, connection_id: str, last_ping: datetime) -> None:
        """Stamp last ping without changing status."""
        pass

    @abstractmethod
    async def mark_disconnected(self, connection_id: str) -> None:
        """Set status `disconnected` regardless of the current status."""
        pass

    @abstractmethod
    async def mark_error_for_endpoint(
        self, server_id: str, connection_url: str, error_message: str
    ) -> None:
        """Set status `error` on every connection to this server and URL."""
        pass

    @abstractmethod
    async def list_recent(self, limit: int = 100) -> List[ConnectionListing]:
        """List the newest connections first, joined with their servers."""
        pass
