"""Merge Guard settings, read from the environment or a local .env file."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the Merge Guard GitHub App.

    Field names map to upper-case environment variables, so
    ``github_app_id`` is read from ``GITHUB_APP_ID``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 3000  # Probot default
    debug: bool = False

    # App registration; the key may be inline PEM or a path to a .pem file
    github_app_id: int
    github_app_private_key: str = ""
    github_app_private_key_path: str = ""
    # Empty disables X-Hub-Signature-256 checks (local development only)
    github_webhook_secret: str = ""
    # REST root; GitHub Enterprise Server uses https://<host>/api/v3
    github_api_url: str = "https://api.github.com"

    log_level: str = "INFO"

    def get_private_key(self) -> str:
        """Return the app's PEM key, preferring the inline value over the file."""
        if self.github_app_private_key:
            return self.github_app_private_key

        if self.github_app_private_key_path:
            key_path = Path(self.github_app_private_key_path)
            if key_path.exists():
                return key_path.read_text()

        raise ValueError(
            "GitHub App private key not configured. "
            "Set GITHUB_APP_PRIVATE_KEY or GITHUB_APP_PRIVATE_KEY_PATH"
        )


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()  # type: ignore[call-arg]
