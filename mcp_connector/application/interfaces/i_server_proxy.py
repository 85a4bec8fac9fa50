import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ProxyResponse:
    """HTTP-like response returned by a server proxy."""

    status_code: int
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        return json.loads(self.body) if self.body else None


class IServerProxy(ABC):
    """Handle to the long-lived proxy that speaks MCP to one server.

    The proxy exposes a request/response surface:
    - POST /add-mcp registers an upstream server ({name, url})
    - GET /mcp/{server_name}/tools lists the server's tools
    - POST /mcp/{server_name}/tools/{tool_name} invokes a tool
    """

    @abstractmethod
    async def fetch(
        self,
        path: str,
        method: str = "GET",
        json: Optional[Any] = None,
    ) -> ProxyResponse:
        """Send a request to the proxy and return its response."""
        pass


class IServerProxyLocator(ABC):
    """Resolves the proxy handle for a server.

    The same server ID always resolves to the same proxy instance and
    different servers never share one.
    """

    @abstractmethod
    def get(self, server_id: str) -> IServerProxy:
        """Return the proxy handle for a server ID."""
        pass
