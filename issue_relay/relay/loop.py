"""Dispatch loop relaying issue mentions from Slack into issue cards."""

import logging
from collections.abc import Iterable
from enum import Enum

from ..errors import ConfigurationError, TrackerSyncError
from ..github_client.models import IssueRecord
from ..slack.client import SlackClient
from ..slack.composer import MessageComposer
from ..slack.events import (
    ChatEvent,
    Connected,
    Disconnected,
    InvalidAuth,
    TextMessage,
)
from ..slack.mentions import extract_mention
from ..storage.issue_store import IssueStore
from ..sync.tracker import TrackerSync

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1


class LoopState(str, Enum):
    """Lifecycle of the dispatch loop."""

    CONNECTING = "connecting"
    CONNECTED = "connected"
    TERMINATED = "terminated"


class EventLoop:
    """Consumes chat events and answers issue mentions.

    A lookup miss triggers one synchronous refresh of the whole store before
    the lookup is retried, so dispatch stalls while that refresh runs.
    """

    def __init__(
        self,
        store: IssueStore,
        sync: TrackerSync,
        slack: SlackClient,
        composer: MessageComposer,
        owner: str,
        repo: str,
    ) -> None:
        self.store = store
        self.sync = sync
        self.slack = slack
        self.composer = composer
        self.owner = owner
        self.repo = repo
        self.state = LoopState.CONNECTING

    def run(self, events: Iterable[ChatEvent]) -> int:
        """Dispatch events until a fatal one arrives.

        Returns:
            Process exit code: 1 on a fatal event, 0 if the stream ends
        """
        for event in events:
            if isinstance(event, Connected):
                logger.info("Connected!")
                self.state = LoopState.CONNECTED
            elif isinstance(event, TextMessage):
                if not self.handle_message(event):
                    return self._terminate(EXIT_FATAL)
            elif isinstance(event, InvalidAuth):
                logger.error("Invalid credentials")
                return self._terminate(EXIT_FATAL)
            elif isinstance(event, Disconnected):
                logger.error("Disconnected: %s", event.reason)
                return self._terminate(EXIT_FATAL)
            else:
                logger.debug("Ignoring event %r", event)
        return self._terminate(EXIT_OK)

    def handle_message(self, event: TextMessage) -> bool:
        """Answer the first issue mention in a message, if any.

        Returns:
            False if a reply had to be sent and sending failed
        """
        number = extract_mention(event.text)
        if number is None:
            return True

        message = self.composer.compose(number, self.resolve(number))
        if message is None:
            logger.info("#%d: nothing to post", number)
            return True

        return self.slack.post_message(event.channel, message)

    def resolve(self, number: int) -> IssueRecord | None:
        """Look up ``number``, refreshing the store once on a miss."""
        record = self.store.get(number)
        if record is not None:
            return record

        logger.info("%d: no such item, fetch all issues again...", number)
        try:
            self.sync.fetch(self.owner, self.repo)
        except (ConfigurationError, TrackerSyncError) as e:
            logger.error("Refresh after miss failed: %s", e)
        return self.store.get(number)

    def _terminate(self, code: int) -> int:
        self.state = LoopState.TERMINATED
        return code
