"""Pydantic models for GitHub data structures.

These models map onto GitHub's REST API v3 issue objects.
API Reference: https://docs.github.com/en/rest/issues
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class IssueState(str, Enum):
    """Lifecycle state reported by the issues API."""

    OPEN = "open"
    CLOSED = "closed"


class IssueRecord(BaseModel):
    """Snapshot of one issue or pull request at fetch time.

    Maps to GitHub REST API Issue object. Pull requests are returned by the
    issues endpoint too; they are told apart by the ``pull_request`` link.
    API Reference: https://docs.github.com/en/rest/issues/issues
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(
        ..., gt=0, description="Issue number within the repository (integer)"
    )
    title: str = Field(..., description="Short description/title of the issue")
    body: str = Field(
        "", description="Detailed description in markdown, empty when unset"
    )
    html_url: str = Field(..., description="Link to the issue on github.com")
    state: IssueState = Field(..., description="Current state: 'open' or 'closed'")
    is_pull_request: bool = Field(
        False, description="Whether the item is a pull request"
    )
    author_avatar_url: str = Field(..., description="Avatar URL of the author")
    created_at: datetime = Field(
        ..., description="Timestamp of issue creation (ISO 8601)"
    )
