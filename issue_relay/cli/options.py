"""Standardized CLI option definitions for consistent shorthand mappings.

This module provides centralized option definitions to ensure consistent
shorthand options across all commands and prevent future drift.
"""

import typer

from ..slack.composer import NotFoundPolicy
from ..storage.issue_store import DEFAULT_SWEEP_INTERVAL, DEFAULT_TTL
from ..sync.scheduler import DEFAULT_REFRESH_INTERVAL

# Repository options
OWNER_OPTION = typer.Option(
    "", "--owner", "-o", envvar="GITHUB_OWNER", help="GitHub repository owner"
)

REPO_OPTION = typer.Option(
    "", "--repo", "-r", envvar="GITHUB_REPO", help="GitHub repository name"
)

# Authentication options
TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

# Behavior options
NOT_FOUND_OPTION = typer.Option(
    NotFoundPolicy.IGNORE,
    "--not-found",
    case_sensitive=False,
    help="What to do when a mentioned number does not exist: ignore or notify",
)

# Cache options
TTL_OPTION = typer.Option(
    DEFAULT_TTL, "--ttl", help="Seconds before a cached issue expires"
)

SWEEP_INTERVAL_OPTION = typer.Option(
    DEFAULT_SWEEP_INTERVAL,
    "--sweep-interval",
    help="Seconds between evictions of expired issues",
)

REFRESH_INTERVAL_OPTION = typer.Option(
    DEFAULT_REFRESH_INTERVAL,
    "--refresh-interval",
    help="Seconds between scheduled refreshes of all issues",
)

# Output options
LOG_LEVEL_OPTION = typer.Option(
    "INFO", "--log-level", "-L", help="Logging level (DEBUG, INFO, WARNING, ERROR)"
)
