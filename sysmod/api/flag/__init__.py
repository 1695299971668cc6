"""Flag module - persisted auto-start markers."""

from .FlagStore import FlagStore

__all__ = ["FlagStore"]
