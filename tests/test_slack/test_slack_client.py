"""Tests for the Slack client."""

import os
from collections.abc import Callable
from unittest.mock import Mock, patch

import pytest
from slack_sdk.errors import SlackApiError

from issue_relay.errors import ConfigurationError
from issue_relay.github_client.models import IssueRecord
from issue_relay.slack.client import SlackClient
from issue_relay.slack.composer import MessageComposer, SlackMessage
from issue_relay.slack.config import SlackConfig


@pytest.fixture
def message(make_record: Callable[..., IssueRecord]) -> SlackMessage:
    """Compose a message for a sample issue."""
    composed = MessageComposer().compose(42, make_record())
    assert composed is not None
    return composed


class TestSlackConfig:
    """Test SlackConfig class."""

    @patch.dict(
        os.environ, {"SLACK_BOT_TOKEN": "xoxb-test", "SLACK_APP_TOKEN": "xapp-test"}
    )
    def test_configured(self) -> None:
        """Test both tokens present."""
        config = SlackConfig()

        assert config.is_configured()
        config.validate()

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_tokens(self) -> None:
        """Test validation names every missing variable."""
        config = SlackConfig()

        assert not config.is_configured()
        with pytest.raises(ConfigurationError, match="SLACK_BOT_TOKEN, SLACK_APP_TOKEN"):
            config.validate()


class TestSlackClient:
    """Test SlackClient class."""

    @pytest.fixture
    def web_client(self) -> Mock:
        """Create a mock WebClient."""
        return Mock()

    @pytest.fixture
    def client(self, web_client: Mock) -> SlackClient:
        """Create a client with a mocked WebClient."""
        client = SlackClient(Mock(spec=SlackConfig))
        client._bot_client = web_client
        return client

    def test_post_message(
        self, client: SlackClient, web_client: Mock, message: SlackMessage
    ) -> None:
        """Test the message is posted with its attachments."""
        web_client.chat_postMessage.return_value = {"ok": True}

        assert client.post_message("C123", message) is True

        web_client.chat_postMessage.assert_called_once_with(
            channel="C123",
            text="42 - Issue 42",
            attachments=message.attachments,
            username="hashtag-bot",
            icon_emoji=":hash:",
            mrkdwn=True,
        )

    def test_post_message_api_error(
        self, client: SlackClient, web_client: Mock, message: SlackMessage
    ) -> None:
        """Test API errors are reported as failure."""
        web_client.chat_postMessage.side_effect = SlackApiError(
            "channel_not_found", {"ok": False, "error": "channel_not_found"}
        )

        assert client.post_message("C123", message) is False

    def test_post_message_connection_error(
        self, client: SlackClient, web_client: Mock, message: SlackMessage
    ) -> None:
        """Test network errors are reported as failure."""
        web_client.chat_postMessage.side_effect = ConnectionError("reset")

        assert client.post_message("C123", message) is False

    def test_bot_client_validates_config(self) -> None:
        """Test the WebClient is only built from a valid config."""
        config = Mock(spec=SlackConfig)
        config.validate.side_effect = ConfigurationError("missing")
        client = SlackClient(config)

        with pytest.raises(ConfigurationError):
            _ = client.bot_client
