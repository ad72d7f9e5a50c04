"""Slack client for posting issue cards."""

import logging
from typing import Optional

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError, SlackClientError

from .composer import SlackMessage
from .config import SlackConfig

logger = logging.getLogger(__name__)


class SlackClient:
    """Client for sending messages to Slack channels."""

    def __init__(self, config: Optional[SlackConfig] = None) -> None:
        """Initialize Slack client with configuration."""
        self.config = config or SlackConfig()
        self._bot_client: Optional[WebClient] = None

    @property
    def bot_client(self) -> WebClient:
        """Get or create Slack WebClient instance for bot token (posting messages)."""
        if self._bot_client is None:
            self.config.validate()
            self._bot_client = WebClient(token=self.config.bot_token)
        return self._bot_client

    def post_message(self, channel: str, message: SlackMessage) -> bool:
        """
        Post a message to a channel.

        Args:
            channel: ID of the channel to post to
            message: The composed message

        Returns:
            True if successful, False otherwise
        """
        try:
            response = self.bot_client.chat_postMessage(
                channel=channel,
                text=message.text,
                attachments=message.attachments,
                username=message.username,
                icon_emoji=message.icon_emoji,
                mrkdwn=True,
            )
            return bool(response["ok"])

        except SlackApiError as e:
            logger.error(f"Error posting message to Slack: {e}")
        except (SlackClientError, OSError) as e:
            logger.error(f"Unexpected error posting message: {e}")

        return False
