from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Redis record store
    redis_url: str = Field(
        default="redis://localhost:6379", validation_alias="REDIS_URL"
    )

    # Server proxies
    proxy_host: str = Field(
        default="http://mcp-proxy.internal", validation_alias="PROXY_HOST"
    )
    mcp_session_timeout_seconds: float = Field(
        default=30.0, validation_alias="MCP_SESSION_TIMEOUT_SECONDS"
    )

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Server
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=8000, validation_alias="PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
