"""Operator actions understood by the toggle engine."""

from enum import Enum


class ToggleAction(str, Enum):
    PRIMARY = "primary"
    """Start/stop the process (live-toggleable modules only)."""

    AUTO_START = "auto_start"
    """Flip the start-at-boot flag; never touches the process."""
