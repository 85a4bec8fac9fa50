from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Server:
    """A remote MCP endpoint registered outside the connection lifecycle."""

    id: str
    name: str
    description: Optional[str] = None
