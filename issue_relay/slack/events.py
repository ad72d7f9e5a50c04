"""Inbound Slack events delivered over Socket Mode."""

import logging
import queue
import time
from collections.abc import Iterator
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.socket_mode import SocketModeClient
from slack_sdk.socket_mode.request import SocketModeRequest
from slack_sdk.socket_mode.response import SocketModeResponse

logger = logging.getLogger(__name__)

DEFAULT_MAX_PENDING = 1000
DEFAULT_HEALTH_CHECK_INTERVAL = 5.0
DEFAULT_RECONNECT_GRACE = 120.0

INVALID_AUTH_ERRORS = {
    "invalid_auth",
    "not_authed",
    "account_inactive",
    "token_revoked",
}


class Connected(BaseModel):
    """The connection is established."""

    model_config = ConfigDict(frozen=True)


class TextMessage(BaseModel):
    """A plain user message posted in a channel."""

    model_config = ConfigDict(frozen=True)

    channel: str
    text: str


class InvalidAuth(BaseModel):
    """Slack rejected the credentials."""

    model_config = ConfigDict(frozen=True)


class Disconnected(BaseModel):
    """The connection could not be established or was lost for good."""

    model_config = ConfigDict(frozen=True)

    reason: str = ""


ChatEvent = Union[Connected, TextMessage, InvalidAuth, Disconnected]


class SlackEventStream:
    """Blocking iterator over chat events received through Socket Mode.

    slack_sdk calls the listeners from its own threads; events are handed to
    the consuming thread through a queue. Reconnecting after a dropped
    websocket is left to the SocketModeClient; if it stays disconnected for
    longer than ``reconnect_grace`` seconds the stream reports Disconnected.
    At most ``max_pending`` text messages are buffered.
    """

    def __init__(
        self,
        app_token: str,
        web_client: WebClient,
        client: Optional[SocketModeClient] = None,
        max_pending: int = DEFAULT_MAX_PENDING,
        health_check_interval: float = DEFAULT_HEALTH_CHECK_INTERVAL,
        reconnect_grace: float = DEFAULT_RECONNECT_GRACE,
    ) -> None:
        self.app_token = app_token
        self.web_client = web_client
        self.max_pending = max_pending
        self.health_check_interval = health_check_interval
        self.reconnect_grace = reconnect_grace
        self._client = client
        self._queue: "queue.Queue[Optional[ChatEvent]]" = queue.Queue()

    @property
    def client(self) -> SocketModeClient:
        if self._client is None:
            self._client = SocketModeClient(
                app_token=self.app_token, web_client=self.web_client
            )
        return self._client

    def connect(self) -> "SlackEventStream":
        """Open the Socket Mode connection.

        Failures are not raised; they arrive as the next event instead.
        """
        client = self.client
        client.message_listeners.append(self._on_message)
        client.socket_mode_request_listeners.append(self._on_request)
        try:
            client.connect()
        except SlackApiError as e:
            error = e.response.get("error") if e.response is not None else None
            if error in INVALID_AUTH_ERRORS:
                self._queue.put(InvalidAuth())
            else:
                self._queue.put(Disconnected(reason=str(e)))
        except (SlackClientError, OSError) as e:
            self._queue.put(Disconnected(reason=str(e)))
        return self

    def close(self) -> None:
        """Close the connection and end iteration."""
        if self._client is not None:
            self._client.close()
        self._queue.put(None)

    def __iter__(self) -> Iterator[ChatEvent]:
        down_since: Optional[float] = None
        while True:
            try:
                event = self._queue.get(timeout=self.health_check_interval)
            except queue.Empty:
                if self.client.is_connected():
                    down_since = None
                    continue
                now = time.monotonic()
                if down_since is None:
                    down_since = now
                if now - down_since >= self.reconnect_grace:
                    yield Disconnected(
                        reason=f"not connected for {now - down_since:.0f}s"
                    )
                    down_since = None
                continue
            if event is None:
                return
            yield event

    def _on_message(
        self,
        client: SocketModeClient,
        message: Dict[str, Any],
        raw_message: Optional[str],
    ) -> None:
        if message.get("type") == "hello":
            self._queue.put(Connected())

    def _on_request(self, client: SocketModeClient, req: SocketModeRequest) -> None:
        client.send_socket_mode_response(
            SocketModeResponse(envelope_id=req.envelope_id)
        )
        if req.type != "events_api":
            return

        event = req.payload.get("event", {})
        if event.get("type") != "message":
            return
        # Edits, joins and bot posts (including our own cards) carry a subtype
        # or bot_id.
        if event.get("subtype") or event.get("bot_id"):
            return
        channel = event.get("channel")
        if not channel:
            logger.debug("Ignoring message event without channel: %s", event)
            return
        if self._queue.qsize() >= self.max_pending:
            logger.warning("Event queue full, dropping message in %s", channel)
            return
        self._queue.put(TextMessage(channel=channel, text=event.get("text") or ""))
