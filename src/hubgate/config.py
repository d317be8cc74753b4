"""Application configuration via environment variables."""

from pydantic import SecretStr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Trust material (TOML file with integrations + events sections)
    config_path: str = "hubgate.toml"

    # Explicit fallback webhook secret; overrides events.modules.github.webhook_secret
    github_webhook_secret: SecretStr | None = None

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"

    # Local development mode (set HUBGATE_LOCAL_MODE=1 for console logs)
    local_mode: bool = False

    # Ingress: GitHub caps webhook payloads at 25 MB
    max_body_bytes: int = 25 * 1024 * 1024

    # Recent accepted events kept by the default in-memory publisher
    event_buffer_size: int = 100

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "HUBGATE_",
    }

    @property
    def json_logs(self) -> bool:
        """JSON log output everywhere except local development."""
        return not self.local_mode


settings = Settings()
