"""Main CLI entry point."""

import logging

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from ..errors import ConfigurationError, TrackerSyncError
from ..github_client.client import GitHubClient
from ..relay.loop import EXIT_FATAL, EXIT_OK, EventLoop
from ..slack.client import SlackClient
from ..slack.composer import MessageComposer, NotFoundPolicy
from ..slack.config import SlackConfig
from ..slack.events import SlackEventStream
from ..storage.issue_store import IssueStore
from ..sync.scheduler import RefreshScheduler
from ..sync.tracker import TrackerSync
from .options import (
    LOG_LEVEL_OPTION,
    NOT_FOUND_OPTION,
    OWNER_OPTION,
    REFRESH_INTERVAL_OPTION,
    REPO_OPTION,
    SWEEP_INTERVAL_OPTION,
    TOKEN_OPTION,
    TTL_OPTION,
)

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="issue-relay",
    help="Relay GitHub issue mentions from Slack into rich messages",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()
logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def run(
    owner: str = OWNER_OPTION,
    repo: str = REPO_OPTION,
    token: str | None = TOKEN_OPTION,
    not_found: NotFoundPolicy = NOT_FOUND_OPTION,
    ttl: float = TTL_OPTION,
    sweep_interval: float = SWEEP_INTERVAL_OPTION,
    refresh_interval: float = REFRESH_INTERVAL_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
) -> None:
    """Listen on Slack and answer #<number> mentions with issue cards.

    Examples:
        issue-relay run --owner YOUR_ORG --repo YOUR_REPO
        issue-relay run -o YOUR_ORG -r YOUR_REPO --not-found notify
    """
    _configure_logging(log_level)

    slack_config = SlackConfig()
    try:
        slack_config.validate()
        github = GitHubClient(token=token)
    except ConfigurationError as e:
        console.print(f"❌ Configuration error: {e}")
        raise typer.Exit(EXIT_FATAL)

    store = IssueStore(ttl=ttl, sweep_interval=sweep_interval)
    sync = TrackerSync(github, store)
    scheduler = RefreshScheduler(sync, owner, repo, interval=refresh_interval)
    slack = SlackClient(slack_config)
    events = SlackEventStream(slack_config.app_token or "", slack.bot_client)

    events.connect()
    store.start_sweeper()
    try:
        try:
            count = scheduler.ensure_warm()
        except (ConfigurationError, TrackerSyncError) as e:
            logger.error("Initial fetch failed: %s", e)
            raise typer.Exit(EXIT_FATAL)
        logger.info("%d issues fetched in cache", count)

        scheduler.start()
        console.print(f"🔍 Relaying mentions of {owner}/{repo} issues")

        loop = EventLoop(
            store, sync, slack, MessageComposer(not_found), owner=owner, repo=repo
        )
        code = loop.run(events)
    except KeyboardInterrupt:
        logger.info("Shutting down")
        code = EXIT_OK
    finally:
        scheduler.shutdown()
        store.stop_sweeper()
        events.close()

    raise typer.Exit(code)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from issue_relay import __version__

    console.print(f"Issue Relay v{__version__}")


if __name__ == "__main__":
    app()
