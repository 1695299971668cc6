"""Process module - query, start and stop module processes."""

from .ProcessConfig import ProcessConfig

__all__ = ["ProcessConfig"]
