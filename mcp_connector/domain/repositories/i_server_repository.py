from abc import ABC, abstractmethod
from typing import Optional

from ..entities.server import Server


class IServerRepository(ABC):
    """Abstract repository interface for Server persistence."""

    @abstractmethod
    async def get_by_id(self, server_id: str) -> Optional[Server]:
        """Retrieve a server by its ID."""
        pass

    @abstractmethod
    async def save(self, server: Server) -> None:
        """Persist a server."""
        pass
