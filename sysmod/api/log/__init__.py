"""Log module - unified logfile shared by all sysmod domains."""

from .append_log import append_log
from .read_log_entries import read_log_entries

__all__ = ["append_log", "read_log_entries"]
