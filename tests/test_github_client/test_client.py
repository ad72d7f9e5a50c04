"""Tests for GitHub client."""

import os
from datetime import datetime, timezone
from unittest.mock import Mock, patch

import pytest
from github.GithubException import GithubException

from issue_relay.errors import ConfigurationError
from issue_relay.github_client.client import GitHubClient
from issue_relay.github_client.models import IssueState


def _github_issue(number: int, state: str = "open", pull_request: object = None) -> Mock:
    """Build a mock PyGitHub issue."""
    mock_user = Mock()
    mock_user.avatar_url = f"https://avatars.githubusercontent.com/u/{number}"

    mock_issue = Mock()
    mock_issue.number = number
    mock_issue.title = f"Issue {number}"
    mock_issue.body = f"Body {number}"
    mock_issue.html_url = f"https://github.com/testorg/testrepo/issues/{number}"
    mock_issue.state = state
    mock_issue.pull_request = pull_request
    mock_issue.user = mock_user
    mock_issue.created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return mock_issue


class TestGitHubClient:
    """Test GitHubClient class."""

    @patch.dict(os.environ, {"GITHUB_TOKEN": "test_token"})
    def test_init_with_env_token(self) -> None:
        """Test initialization with environment token."""
        with patch("issue_relay.github_client.client.Github") as mock_github:
            client = GitHubClient()

            assert client.token == "test_token"
            mock_github.assert_called_once()
            assert mock_github.call_args.kwargs["per_page"] == 100

    def test_init_with_explicit_token(self) -> None:
        """Test initialization with explicit token."""
        with patch("issue_relay.github_client.client.Github"):
            client = GitHubClient(token="explicit_token")

            assert client.token == "explicit_token"

    @patch.dict(os.environ, {}, clear=True)
    def test_init_without_token(self) -> None:
        """Test initialization without token raises error."""
        with pytest.raises(ConfigurationError, match="GitHub token is required"):
            GitHubClient()

    @patch("issue_relay.github_client.client.Github")
    def test_get_repository(self, mock_github_class: Mock) -> None:
        """Test repository retrieval uses owner/name."""
        mock_repo = Mock()
        mock_github = Mock()
        mock_github.get_repo.return_value = mock_repo
        mock_github_class.return_value = mock_github

        client = GitHubClient(token="test_token")

        assert client.get_repository("testorg", "testrepo") == mock_repo
        mock_github.get_repo.assert_called_once_with("testorg/testrepo")

    @patch("issue_relay.github_client.client.Github")
    def test_convert_issue(self, mock_github_class: Mock) -> None:
        """Test issue conversion."""
        client = GitHubClient(token="test_token")

        result = client._convert_issue(_github_issue(5, state="closed"))

        assert result.number == 5
        assert result.title == "Issue 5"
        assert result.body == "Body 5"
        assert result.state == IssueState.CLOSED
        assert result.is_pull_request is False
        assert result.author_avatar_url == "https://avatars.githubusercontent.com/u/5"

    @patch("issue_relay.github_client.client.Github")
    def test_convert_pull_request(self, mock_github_class: Mock) -> None:
        """Test that a pull_request link marks the record as a pull request."""
        client = GitHubClient(token="test_token")

        result = client._convert_issue(_github_issue(6, pull_request=Mock()))

        assert result.is_pull_request is True

    @patch("issue_relay.github_client.client.Github")
    def test_convert_issue_without_body(self, mock_github_class: Mock) -> None:
        """Test that a null body becomes an empty string."""
        client = GitHubClient(token="test_token")
        github_issue = _github_issue(8)
        github_issue.body = None

        assert client._convert_issue(github_issue).body == ""

    @patch("issue_relay.github_client.client.Github")
    def test_list_issue_pages(self, mock_github_class: Mock) -> None:
        """Test pages are requested until a short page is returned."""
        mock_issues = Mock()
        mock_issues.get_page.side_effect = [
            [_github_issue(1), _github_issue(2)],
            [_github_issue(3)],
        ]
        mock_repo = Mock()
        mock_repo.get_issues.return_value = mock_issues
        mock_github_class.return_value.get_repo.return_value = mock_repo

        client = GitHubClient(token="test_token", per_page=2)
        pages = list(client.list_issue_pages("testorg", "testrepo"))

        assert [[r.number for r in page] for page in pages] == [[1, 2], [3]]
        mock_repo.get_issues.assert_called_once_with(state="all")
        assert [c.args for c in mock_issues.get_page.call_args_list] == [(0,), (1,)]

    @patch("issue_relay.github_client.client.Github")
    def test_list_issue_pages_stops_on_empty_page(
        self, mock_github_class: Mock
    ) -> None:
        """Test an empty page ends iteration without yielding."""
        mock_issues = Mock()
        mock_issues.get_page.side_effect = [
            [_github_issue(1), _github_issue(2)],
            [],
        ]
        mock_github_class.return_value.get_repo.return_value.get_issues.return_value = (
            mock_issues
        )

        client = GitHubClient(token="test_token", per_page=2)
        pages = list(client.list_issue_pages("testorg", "testrepo"))

        assert len(pages) == 1
        assert mock_issues.get_page.call_count == 2

    @patch("issue_relay.github_client.client.Github")
    def test_list_issue_pages_propagates_errors(self, mock_github_class: Mock) -> None:
        """Test a failing page aborts iteration."""
        mock_issues = Mock()
        mock_issues.get_page.side_effect = [
            [_github_issue(1), _github_issue(2)],
            GithubException(502, "Bad Gateway", None),
        ]
        mock_github_class.return_value.get_repo.return_value.get_issues.return_value = (
            mock_issues
        )

        client = GitHubClient(token="test_token", per_page=2)
        pages = client.list_issue_pages("testorg", "testrepo")

        assert len(next(pages)) == 2
        with pytest.raises(GithubException):
            next(pages)
