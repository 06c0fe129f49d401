"""Server configuration loaded from the environment."""

import os
from dataclasses import dataclass


def env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ServerConfig:
    """HTTP server configuration."""
    host: str = "127.0.0.1"
    port: int = 4000
    log_level: str = "INFO"
    environment: str = "development"
    seed: bool = False
    cors_origins: tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Create configuration from environment variables."""
        origins = os.getenv("KG_CORS_ORIGINS", "*")
        return cls(
            host=os.getenv("KG_HTTP_HOST", cls.host),
            port=int(os.getenv("KG_HTTP_PORT", str(cls.port))),
            log_level=os.getenv("KG_LOG_LEVEL", cls.log_level).upper(),
            environment=os.getenv("KG_ENVIRONMENT", cls.environment),
            seed=env_bool("KG_SEED", cls.seed),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        )
