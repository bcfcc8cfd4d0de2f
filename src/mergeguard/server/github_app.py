"""GitHub App authentication and client management."""

import time
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache

import httpx
import jwt

from mergeguard.github.client import GitHubClient
from mergeguard.server.config import Settings, get_settings


# Refresh installation tokens this long before they expire
TOKEN_REFRESH_MARGIN = 300


@dataclass
class InstallationAuth:
    """Authentication for a GitHub App installation."""

    installation_id: int
    token: str
    expires_at: float


class GitHubAppAuth:
    """GitHub App authentication manager."""

    def __init__(self, settings: Settings | None = None):
        """Initialize GitHub App authentication.

        Args:
            settings: Server settings (uses default if not provided)
        """
        self.settings = settings or get_settings()
        self._private_key = self.settings.get_private_key()
        self._app_id = self.settings.github_app_id
        self._api_url = self.settings.github_api_url.rstrip("/")
        self._installation_tokens: dict[int, InstallationAuth] = {}

    def generate_jwt(self, expiration_seconds: int = 600) -> str:
        """Generate a JWT for GitHub App authentication.

        Args:
            expiration_seconds: JWT expiration time in seconds

        Returns:
            JWT token string
        """
        now = int(time.time())
        payload = {
            "iat": now - 60,  # Issued at (60s in the past for clock drift)
            "exp": now + expiration_seconds,
            "iss": str(self._app_id),
        }
        return jwt.encode(payload, self._private_key, algorithm="RS256")

    async def get_installation_token(self, installation_id: int) -> str:
        """Get an installation access token.

        Args:
            installation_id: GitHub App installation ID

        Returns:
            Installation access token
        """
        cached = self._installation_tokens.get(installation_id)
        if cached and cached.expires_at > time.time() + TOKEN_REFRESH_MARGIN:
            return cached.token

        jwt_token = self.generate_jwt()

        async with httpx.AsyncClient() as client:
            response = await client.post(
                f"{self._api_url}/app/installations/{installation_id}/access_tokens",
                headers={
                    "Authorization": f"Bearer {jwt_token}",
                    "Accept": "application/vnd.github+json",
                    "X-GitHub-Api-Version": "2022-11-28",
                },
            )
            response.raise_for_status()
            data = response.json()

        expires_at = time.time() + 3600  # Default 1 hour
        if "expires_at" in data:
            exp_dt = datetime.fromisoformat(data["expires_at"].replace("Z", "+00:00"))
            expires_at = exp_dt.timestamp()

        auth = InstallationAuth(
            installation_id=installation_id,
            token=data["token"],
            expires_at=expires_at,
        )
        self._installation_tokens[installation_id] = auth

        return auth.token

    async def get_client_for_installation(
        self, installation_id: int, repo_name: str
    ) -> GitHubClient:
        """Get a GitHub client authenticated as an installation.

        Args:
            installation_id: GitHub App installation ID
            repo_name: Repository full name (owner/repo)

        Returns:
            Authenticated GitHubClient bound to the repository
        """
        token = await self.get_installation_token(installation_id)
        return GitHubClient(
            token=token,
            repo_name=repo_name,
            base_url=self._api_url,
        )


@lru_cache
def get_github_app_auth() -> GitHubAppAuth:
    """Get cached GitHub App auth instance."""
    return GitHubAppAuth()
