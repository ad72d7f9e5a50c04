"""Keeping the issue store in step with GitHub."""

from .scheduler import RefreshScheduler
from .tracker import TrackerSync

__all__ = ["RefreshScheduler", "TrackerSync"]
