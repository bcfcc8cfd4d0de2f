"""PR title validation reported as a GitHub check run."""

import logging
import re
from dataclasses import dataclass

from mergeguard.github.client import GitHubClient, GitHubClientError
from mergeguard.github.models import CheckConclusion, PullRequestEvent


logger = logging.getLogger(__name__)

CHECK_NAME = "[Merge Guard]"
CHECK_OUTPUT_TITLE = "[Merge Guard] PR Title Check"

# Unanchored and case-sensitive: "xJIRA-12y" passes, "jira-12" does not
TICKET_PATTERN = re.compile(r"JIRA-[0-9]+")

ERROR_MESSAGE = "Error: PR title does not match the required format (e.g., JIRA-1234)"
SUCCESS_MESSAGE = "PR title is valid"


@dataclass
class ValidationOutcome:
    """What one validation run did on GitHub."""

    check_run_id: int | None = None
    conclusion: CheckConclusion | None = None
    summary: str = ""
    commented: bool = False
    finalized: bool = False
    error: str | None = None

    def to_dict(self) -> dict:
        return {
            "status": "error" if self.error else "success",
            "check_run_id": self.check_run_id,
            "conclusion": self.conclusion.value if self.conclusion else None,
            "commented": self.commented,
            "finalized": self.finalized,
            "error": self.error,
        }


def title_matches(title: str | None) -> bool:
    """Check whether a PR title contains a ticket reference."""
    if not title:
        return False
    return TICKET_PATTERN.search(title) is not None


def evaluate_title(title: str | None) -> tuple[CheckConclusion, str]:
    """Decide the check conclusion and summary for a PR title.

    Args:
        title: Pull request title

    Returns:
        Tuple of (conclusion, output summary)
    """
    if title_matches(title):
        return CheckConclusion.SUCCESS, SUCCESS_MESSAGE
    return CheckConclusion.FAILURE, ERROR_MESSAGE


class TitleValidator:
    """Validates a PR title and reports the result as a check run.

    Each run creates a new ``[Merge Guard]`` check run on the PR head commit,
    comments on the PR when the title has no ticket reference, and then
    completes the check run. GitHub errors are logged, never raised.
    """

    def __init__(self, github_client: GitHubClient):
        self.github = github_client

    def run(self, event: PullRequestEvent) -> ValidationOutcome:
        """Validate the title of the PR in ``event``.

        Args:
            event: Pull request event

        Returns:
            ValidationOutcome describing the calls that succeeded
        """
        outcome = ValidationOutcome()

        try:
            check_run = self.github.create_check_run(CHECK_NAME, event.head_sha)
        except GitHubClientError as e:
            logger.exception(
                f"Error while checking PR title for "
                f"{event.repo_full_name}#{event.number}: {e}"
            )
            outcome.error = str(e)
            return outcome

        outcome.check_run_id = check_run.id
        conclusion, summary = evaluate_title(event.title)
        outcome.conclusion = conclusion
        outcome.summary = summary

        logger.info(
            f"PR {event.repo_full_name}#{event.number} title check: "
            f"{conclusion.value} (check run {check_run.id})"
        )

        if conclusion == CheckConclusion.FAILURE:
            try:
                self.github.post_comment(event.number, ERROR_MESSAGE)
                outcome.commented = True
            except GitHubClientError as e:
                # The title is invalid either way, so the check is still completed
                logger.exception(f"Error commenting on PR #{event.number}: {e}")
                outcome.error = str(e)

        try:
            self.github.complete_check_run(
                check_run.id,
                conclusion,
                CHECK_OUTPUT_TITLE,
                summary,
            )
            outcome.finalized = True
        except GitHubClientError as e:
            logger.exception(f"Error completing check run {check_run.id}: {e}")
            outcome.error = outcome.error or str(e)
            self._cancel_check_run(check_run.id, e)

        return outcome

    def _cancel_check_run(self, check_run_id: int, cause: Exception) -> None:
        """Make one attempt to move a stuck check run out of in_progress."""
        try:
            self.github.complete_check_run(
                check_run_id,
                CheckConclusion.CANCELLED,
                CHECK_OUTPUT_TITLE,
                f"Merge Guard could not report the title check result: {cause}",
            )
            logger.warning(f"Check run {check_run_id} marked cancelled")
        except GitHubClientError as e:
            logger.error(
                f"Check run {check_run_id} left in_progress, cancel failed: {e}"
            )
