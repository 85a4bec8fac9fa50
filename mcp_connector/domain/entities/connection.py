from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ConnectionStatus(Enum):
    CONNECTING = "connecting"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    ERROR = "error"


@dataclass
class Connection:
    """A single attempt to bind a client session to an MCP server.

    Rows are never deleted. A new connect attempt always creates a new
    connection rather than reviving a terminal one.
    """

    id: str
    server_id: str
    connection_url: str
    status: ConnectionStatus = ConnectionStatus.CONNECTING
    created_at: datetime = field(default_factory=utcnow)
    last_ping: Optional[datetime] = None
    error_message: Optional[str] = None

    @classmethod
    def start(cls, connection_id: str, server_id: str, connection_url: str) -> "Connection":
        """Build the initial `connecting` row for a connect attempt."""
        return cls(
            id=connection_id,
            server_id=server_id,
            connection_url=connection_url,
            status=ConnectionStatus.CONNECTING,
        )

    @property
    def is_connected(self) -> bool:
        return self.status == ConnectionStatus.CONNECTED
