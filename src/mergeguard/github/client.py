"""GitHub client wrapping PyGithub."""

from github import Auth, Github, GithubException
from github.Repository import Repository
from requests.exceptions import RequestException

from mergeguard.github.models import CheckConclusion, CheckRunRef, CheckStatus


DEFAULT_API_URL = "https://api.github.com"

# PyGithub raises GithubException for API errors and lets requests'
# transport errors (connection reset, timeout) through unchanged
GITHUB_ERRORS = (GithubException, RequestException)


class GitHubClientError(Exception):
    """Raised when GitHub operations fail."""


class GitHubClient:
    """GitHub client for check runs and PR comments.

    Each operation is a single REST request; the repository object is lazy
    and never fetched.
    """

    def __init__(
        self,
        token: str,
        repo_name: str,
        base_url: str = DEFAULT_API_URL,
    ):
        if not token:
            raise GitHubClientError("GitHub token is required.")
        if not repo_name:
            raise GitHubClientError("Repository name is required.")

        self.token = token
        self._github = Github(auth=Auth.Token(token), base_url=base_url)
        self._repo_name = repo_name
        self._repo: Repository | None = None

    @property
    def repo(self) -> Repository:
        if self._repo is None:
            self._repo = self._github.get_repo(self._repo_name, lazy=True)
        return self._repo

    # ------------------------------------------------------------------
    # Check runs
    # ------------------------------------------------------------------

    def create_check_run(
        self,
        name: str,
        head_sha: str,
        status: CheckStatus = CheckStatus.IN_PROGRESS,
    ) -> CheckRunRef:
        """Create a check run on a commit.

        Args:
            name: Check run display name
            head_sha: Commit SHA the check is attached to
            status: Initial status

        Returns:
            Reference to the created check run
        """
        try:
            run = self.repo.create_check_run(
                name=name,
                head_sha=head_sha,
                status=status.value,
            )
            return CheckRunRef(id=run.id, name=name, head_sha=head_sha)
        except GITHUB_ERRORS as e:
            raise GitHubClientError(
                f"Failed to create check run '{name}' on {head_sha}: {e}"
            ) from e

    def complete_check_run(
        self,
        check_run_id: int,
        conclusion: CheckConclusion,
        title: str,
        summary: str,
    ) -> None:
        """Mark a check run completed with a conclusion and output.

        Args:
            check_run_id: ID returned when the check run was created
            conclusion: Final conclusion
            title: Output title
            summary: Output summary
        """
        try:
            self._github.requester.requestJsonAndCheck(
                "PATCH",
                f"/repos/{self._repo_name}/check-runs/{check_run_id}",
                input={
                    "status": CheckStatus.COMPLETED.value,
                    "conclusion": conclusion.value,
                    "output": {"title": title, "summary": summary},
                },
            )
        except GITHUB_ERRORS as e:
            raise GitHubClientError(
                f"Failed to update check run {check_run_id}: {e}"
            ) from e

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def post_comment(self, issue_or_pr_number: int, body: str) -> None:
        try:
            self._github.requester.requestJsonAndCheck(
                "POST",
                f"/repos/{self._repo_name}/issues/{issue_or_pr_number}/comments",
                input={"body": body},
            )
        except GITHUB_ERRORS as e:
            raise GitHubClientError(
                f"Failed to post comment on #{issue_or_pr_number}: {e}"
            ) from e
