"""Build Slack attachment messages for resolved issues."""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from ..github_client.models import IssueRecord, IssueState

STATE_OPEN = "#67C63D"
STATE_CLOSED = "#B52003"
STATE_MERGED = "#65488D"
STATE_NOT_FOUND = "#D3D3D3"

BOT_USERNAME = "hashtag-bot"
BOT_ICON_EMOJI = ":hash:"
MARKDOWN_IN = ["title", "text", "fields", "fallback"]


class NotFoundPolicy(str, Enum):
    """What to post when a mentioned number is not in the repository."""

    IGNORE = "ignore"
    NOTIFY = "notify"


class SlackMessage(BaseModel):
    """Payload for chat.postMessage."""

    text: str = Field(..., description="Fallback text for notifications")
    username: str = BOT_USERNAME
    icon_emoji: str = BOT_ICON_EMOJI
    attachments: List[Dict[str, Any]] = Field(default_factory=list)


def state_color(record: IssueRecord) -> str:
    """Map an issue's state to the attachment color.

    The issues API reports merged and unmerged closed pull requests alike as
    ``closed``, so every closed pull request is shown as merged.
    """
    if record.state == IssueState.OPEN:
        return STATE_OPEN
    if record.is_pull_request:
        return STATE_MERGED
    return STATE_CLOSED


class MessageComposer:
    """Turns lookup results into Slack messages."""

    def __init__(self, not_found_policy: NotFoundPolicy = NotFoundPolicy.IGNORE):
        self.not_found_policy = not_found_policy

    def compose(self, number: int, record: IssueRecord | None) -> SlackMessage | None:
        """Build the message for ``number``.

        Returns:
            The message to post, or None when there is nothing to post
        """
        if record is None:
            if self.not_found_policy == NotFoundPolicy.NOTIFY:
                return self._format_not_found(number)
            return None
        return self._format_issue(record)

    def _format_issue(self, record: IssueRecord) -> SlackMessage:
        method = "Pull Requests" if record.is_pull_request else "Issues"
        fallback = f"{record.number} - {record.title}"

        attachment: Dict[str, Any] = {
            "fallback": fallback,
            "title": f"<{record.html_url}|{record.title}>",
            "text": record.body,
            "mrkdwn_in": MARKDOWN_IN,
            "color": state_color(record),
            "thumb_url": record.author_avatar_url,
            "footer": f"GitHub {method}",
            "ts": int(record.created_at.timestamp()),
        }
        return SlackMessage(text=fallback, attachments=[attachment])

    def _format_not_found(self, number: int) -> SlackMessage:
        text = f"#{number} was not found in the repository"
        attachment: Dict[str, Any] = {
            "fallback": text,
            "text": text,
            "mrkdwn_in": MARKDOWN_IN,
            "color": STATE_NOT_FOUND,
        }
        return SlackMessage(text=text, attachments=[attachment])
