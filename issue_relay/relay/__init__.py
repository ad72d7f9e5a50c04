"""Event dispatch for the relay."""

from .loop import EXIT_FATAL, EXIT_OK, EventLoop, LoopState

__all__ = ["EXIT_FATAL", "EXIT_OK", "EventLoop", "LoopState"]
