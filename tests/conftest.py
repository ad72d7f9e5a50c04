"""Test configuration and fixtures."""

from collections.abc import Callable
from datetime import datetime, timezone

import pytest

from issue_relay.github_client.models import IssueRecord, IssueState


@pytest.fixture
def make_record() -> Callable[..., IssueRecord]:
    """Factory for issue records with sensible defaults."""

    def _make(
        number: int = 42,
        state: IssueState = IssueState.OPEN,
        is_pull_request: bool = False,
        **overrides: object,
    ) -> IssueRecord:
        fields: dict[str, object] = {
            "number": number,
            "title": f"Issue {number}",
            "body": "Steps to reproduce",
            "html_url": f"https://github.com/testorg/testrepo/issues/{number}",
            "state": state,
            "is_pull_request": is_pull_request,
            "author_avatar_url": "https://avatars.githubusercontent.com/u/1",
            "created_at": datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
        }
        fields.update(overrides)
        return IssueRecord(**fields)  # type: ignore[arg-type]

    return _make
