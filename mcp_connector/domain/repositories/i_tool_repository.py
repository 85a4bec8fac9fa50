from abc import ABC, abstractmethod
from typing import List

from ..entities.tool import Tool


class IToolRepository(ABC):
    """Abstract repository interface for Tool persistence."""

    @abstractmethod
    async def add(self, tool: Tool) -> None:
        """Insert a tool row. Existing rows for the server are left untouched."""
        pass

    @abstractmethod
    async def list_by_server(self, server_id: str) -> List[Tool]:
        """List every stored tool row for a server in insertion order."""
        pass
