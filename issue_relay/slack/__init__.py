"""Slack integration: inbound events, mention parsing and issue cards."""

from .client import SlackClient
from .composer import MessageComposer, NotFoundPolicy, SlackMessage
from .config import SlackConfig
from .events import (
    Connected,
    Disconnected,
    InvalidAuth,
    SlackEventStream,
    TextMessage,
)
from .mentions import extract_mention

__all__ = [
    "Connected",
    "Disconnected",
    "InvalidAuth",
    "MessageComposer",
    "NotFoundPolicy",
    "SlackClient",
    "SlackConfig",
    "SlackEventStream",
    "SlackMessage",
    "TextMessage",
    "extract_mention",
]
