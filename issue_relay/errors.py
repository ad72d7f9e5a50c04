"""Exception hierarchy for the issue relay."""


class IssueRelayError(Exception):
    """Base class for all issue relay errors."""


class ConfigurationError(IssueRelayError, ValueError):
    """Raised when required settings (repository, tokens) are missing."""


class TrackerSyncError(IssueRelayError):
    """Raised when fetching issues from GitHub fails part way through.

    The underlying GitHub exception is available as ``__cause__``.
    """

    def __init__(self, owner: str, repo: str, message: str) -> None:
        super().__init__(f"Failed to fetch issues for {owner}/{repo}: {message}")
        self.owner = owner
        self.repo = repo
