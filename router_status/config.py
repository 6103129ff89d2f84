"""
Application configuration loaded from environment variables.
Uses pydantic-settings so every value can be overridden via a .env file.

The provider defaults (project, region, credentials, user agent) never reach
the read path through this module directly: `Settings.provider_context()`
freezes them into a `ProviderContext` that is injected per request.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings


class ProviderContext(BaseModel):
    """Ambient provider configuration threaded into every read."""

    model_config = ConfigDict(frozen=True)

    project: Optional[str] = None
    region: Optional[str] = None
    user_agent: str = "router-status/1.0.0"
    # Service account key file; Application Default Credentials when unset
    credentials_file: Optional[str] = None
    compute_endpoint: Optional[str] = None


class Settings(BaseSettings):
    # ── JWT ──────────────────────────────────────────────────────────────────
    # Secret used to sign/verify JWT tokens.  Change this in production!
    jwt_secret_key: str = "changeme-super-secret-key"
    jwt_algorithm: str = "HS256"
    # Token lifetime in minutes
    jwt_expire_minutes: int = 60

    # ── Engine clients ────────────────────────────────────────────────────────
    # Comma-separated "client:password" pairs allowed to request tokens.
    # Passwords may be plain text or bcrypt hashes.
    engine_clients: str = "terraform:changeme"

    # ── Google Cloud provider defaults ────────────────────────────────────────
    default_project: str = ""
    default_region: str = ""
    # Leave blank to use Application Default Credentials
    credentials_file: str = ""
    # Override the Compute API endpoint (e.g. a private or regional endpoint)
    compute_endpoint: str = ""
    user_agent: str = "router-status/1.0.0"

    # ── Logging ──────────────────────────────────────────────────────────────
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    # ── Helpers ───────────────────────────────────────────────────────────────
    def get_engine_clients(self) -> dict[str, str]:
        """Return the client credential map {client: password}."""
        clients: dict[str, str] = {}
        for pair in self.engine_clients.split(","):
            pair = pair.strip()
            if ":" in pair:
                client, password = pair.split(":", 1)
                clients[client.strip()] = password.strip()
        return clients

    def provider_context(self) -> ProviderContext:
        """Snapshot the provider defaults; empty strings become ``None``."""
        return ProviderContext(
            project=self.default_project or None,
            region=self.default_region or None,
            user_agent=self.user_agent,
            credentials_file=self.credentials_file or None,
            compute_endpoint=self.compute_endpoint or None,
        )


settings = Settings()
