"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import IssueRecord, IssueState

__all__ = [
    "GitHubClient",
    "IssueRecord",
    "IssueState",
]
