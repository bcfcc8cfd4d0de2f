"""GitHub integration module for mergeguard."""

from mergeguard.github.client import GitHubClient, GitHubClientError
from mergeguard.github.models import (
    CheckConclusion,
    CheckRunRef,
    CheckStatus,
    PullRequestEvent,
)

__all__ = [
    "GitHubClient",
    "GitHubClientError",
    "CheckConclusion",
    "CheckRunRef",
    "CheckStatus",
    "PullRequestEvent",
]
