"""GitHub API client using PyGitHub."""

import logging
import os
from collections.abc import Iterator

from github import Auth, Github
from github.Issue import Issue
from github.Repository import Repository

from ..errors import ConfigurationError
from .models import IssueRecord, IssueState

logger = logging.getLogger(__name__)

PAGE_SIZE = 100


class GitHubClient:
    """GitHub API client listing repository issues page by page."""

    def __init__(self, token: str | None = None, per_page: int = PAGE_SIZE):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
            per_page: Number of issues requested per API page.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ConfigurationError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.per_page = per_page
        self.github = Github(auth=Auth.Token(self.token), per_page=per_page)

    def _convert_issue(self, github_issue: Issue) -> IssueRecord:
        """Convert PyGitHub issue to our model."""
        return IssueRecord(
            number=github_issue.number,
            title=github_issue.title,
            body=github_issue.body or "",
            html_url=github_issue.html_url,
            state=IssueState(github_issue.state),
            is_pull_request=github_issue.pull_request is not None,
            author_avatar_url=github_issue.user.avatar_url,
            created_at=github_issue.created_at,
        )

    def get_repository(self, owner: str, repo: str) -> Repository:
        """Get repository object."""
        return self.github.get_repo(f"{owner}/{repo}")

    def list_issue_pages(self, owner: str, repo: str) -> Iterator[list[IssueRecord]]:
        """Yield every issue and pull request of a repository, one page at a time.

        Both open and closed items are listed. Iteration stops at the first
        page shorter than ``per_page``. GitHub errors propagate unchanged, so a
        failure aborts the remaining pages.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name

        Yields:
            Lists of IssueRecord objects, one list per API page
        """
        repository = self.get_repository(owner, repo)
        issues = repository.get_issues(state="all")

        page = 0
        while True:
            github_issues = issues.get_page(page)
            if github_issues:
                yield [self._convert_issue(issue) for issue in github_issues]
            logger.debug(
                "Fetched page %d of %s/%s (%d items)",
                page,
                owner,
                repo,
                len(github_issues),
            )
            if len(github_issues) < self.per_page:
                break
            page += 1
