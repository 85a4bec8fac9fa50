from dataclasses import dataclass


@dataclass(frozen=True)
class ProxyName:
    """Immutable value object naming the long-lived proxy for one server.

    The name is a pure function of the server ID, so every operation that
    touches a server resolves the same proxy instance.
    """

    value: str

    PREFIX = "mcp-client-"

    def __post_init__(self) -> None:
        if not self.value.startswith(self.PREFIX):
            raise ValueError(f"Invalid proxy name: {self.value}")

    @classmethod
    def for_server(cls, server_id: str) -> "ProxyName":
        """Derive the proxy name for a server ID."""
        return cls(value=f"{cls.PREFIX}{server_id}")

    @property
    def server_id(self) -> str:
        return self.value[len(self.PREFIX) :]

    def __str__(self) -> str:
        return self.value
