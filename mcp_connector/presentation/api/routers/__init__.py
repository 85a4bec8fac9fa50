from .connection_router import router as connection_router
from .server_router import router as server_router

__all__ = ["connection_router", "server_router"]
