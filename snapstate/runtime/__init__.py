"""Runtime helpers: command context and async dispatch."""

from snapstate.runtime.context import CommandContext

__all__ = ["CommandContext"]
