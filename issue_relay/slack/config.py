"""Configuration for Slack integration."""

import os
from typing import Optional

from ..errors import ConfigurationError


class SlackConfig:
    """Configuration class for Slack API integration."""

    def __init__(self) -> None:
        """Initialize Slack configuration from environment variables."""
        self.bot_token: Optional[str] = os.getenv("SLACK_BOT_TOKEN")
        self.app_token: Optional[str] = os.getenv("SLACK_APP_TOKEN")

    def is_configured(self) -> bool:
        """Check if Slack is properly configured."""
        return bool(self.bot_token) and bool(self.app_token)

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        missing_tokens = []
        if not self.bot_token:
            missing_tokens.append("SLACK_BOT_TOKEN")
        if not self.app_token:
            missing_tokens.append("SLACK_APP_TOKEN")

        if missing_tokens:
            raise ConfigurationError(
                f"Environment variables required for Slack: {', '.join(missing_tokens)}"
            )
