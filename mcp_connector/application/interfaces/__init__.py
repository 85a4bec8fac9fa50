from .i_server_proxy import IServerProxy, IServerProxyLocator, ProxyResponse

__all__ = [
    "IServerProxy",
    "IServerProxyLocator",
    "ProxyResponse",
]
