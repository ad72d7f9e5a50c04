"""In-memory storage for fetched issues."""

from .issue_store import IssueStore

__all__ = ["IssueStore"]
