import logging
from typing import Any, Optional

import httpx

from mcp_connector.domain.exceptions.domain_exceptions import UpstreamError
from mcp_connector.domain.value_objects.proxy_name import ProxyName
from mcp_connector.application.interfaces.i_server_proxy import (
    IServerProxy,
    IServerProxyLocator,
    ProxyResponse,
)
from mcp_connector.infrastructure.mcp.proxy.server_proxy import (
    ServerProxy,
    SessionFactory,
)

logger = logging.getLogger(__name__)


class ServerProxyHandle(IServerProxy):
    """Reaches a ServerProxy over HTTP through an in-process ASGI transport."""

    def __init__(self, proxy: ServerProxy, base_url: str):
        self._proxy = proxy
        self._base_url = base_url

    @property
    def proxy(self) -> ServerProxy:
        return self._proxy

    async def fetch(
        self,
        path: str,
        method: str = "GET",
        json: Optional[Any] = None,
    ) -> ProxyResponse:
        transport = httpx.ASGITransport(app=self._proxy.app)
        try:
            async with httpx.AsyncClient(
                transport=transport, base_url=self._base_url
            ) as client:
                response = await client.request(method, path, json=json)
        except httpx.HTTPError as e:
            raise UpstreamError(f"Proxy {self._proxy.name} unreachable: {e}") from e

        return ProxyResponse(status_code=response.status_code, body=response.content)


class ServerProxyLocator(IServerProxyLocator):
    """Keeps exactly one ServerProxy per server ID.

    Lookup and creation happen without suspending, so concurrent requests
    on the event loop can never create two proxies for one server.
    """

    def __init__(
        self,
        base_url: str,
        session_timeout_seconds: float = 30.0,
        session_factory: Optional[SessionFactory] = None,
    ):
        self._base_url = base_url
        self._session_timeout_seconds = session_timeout_seconds
        self._session_factory = session_factory
        self._proxies: dict[ProxyName, ServerProxy] = {}

    def get(self, server_id: str) -> ServerProxyHandle:
        name = ProxyName.for_server(server_id)
        proxy = self._proxies.get(name)
        if proxy is None:
            proxy = ServerProxy(
                name,
                session_factory=self._session_factory,
                session_timeout_seconds=self._session_timeout_seconds,
            )
            self._proxies[name] = proxy
            logger.debug("Created proxy %s", name)
        return ServerProxyHandle(proxy, self._base_url)

    def __len__(self) -> int:
        return len(self._proxies)
