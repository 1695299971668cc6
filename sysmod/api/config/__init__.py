"""Config module - sysmod configuration models and commands."""

from .ContentsConfig import ContentsConfig
from .LogConfig import LogConfig
from .RefreshConfig import RefreshConfig

__all__ = ["ContentsConfig", "LogConfig", "RefreshConfig"]
