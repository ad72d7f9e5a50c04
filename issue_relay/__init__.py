"""Relay GitHub issue and pull request mentions from Slack into rich messages."""

__version__ = "0.1.0"
