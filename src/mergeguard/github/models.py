"""Data models for GitHub entities."""

from dataclasses import dataclass
from enum import Enum


class CheckStatus(str, Enum):
    """Check run status."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class CheckConclusion(str, Enum):
    """Check run conclusion."""

    SUCCESS = "success"
    FAILURE = "failure"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class CheckRunRef:
    """Reference to a check run created on GitHub."""

    id: int
    name: str
    head_sha: str


@dataclass(frozen=True)
class PullRequestEvent:
    """The fields of a pull_request webhook the title check consumes."""

    owner: str
    repo: str
    number: int
    title: str
    head_sha: str
    action: str
    installation_id: int = 0

    @property
    def repo_full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_payload(cls, payload: dict) -> "PullRequestEvent":
        """Build an event from a raw pull_request webhook payload.

        Args:
            payload: Webhook payload dictionary

        Returns:
            Parsed PullRequestEvent
        """
        pr = payload.get("pull_request", {})
        repository = payload.get("repository", {})
        return cls(
            owner=repository.get("owner", {}).get("login", ""),
            repo=repository.get("name", ""),
            number=pr.get("number", 0),
            title=pr.get("title") or "",
            head_sha=pr.get("head", {}).get("sha", ""),
            action=payload.get("action", ""),
            installation_id=payload.get("installation", {}).get("id", 0),
        )
