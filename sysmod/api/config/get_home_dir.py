"""Get sysmod home directory path or path under it."""

import os
from pathlib import Path

from ...constants import SYSMOD_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get sysmod home directory path or path under it.

    Checks SYSMOD_HOME environment variable first, defaults to ~/.sysmod if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json", "logfile")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/home/user/.sysmod")
        >>> get_home_dir("config.json")
        Path("/home/user/.sysmod/config.json")
    """
    home_env = os.environ.get("SYSMOD_HOME")
    if home_env:
        sysmod_home = Path(home_env).expanduser().resolve()
    else:
        sysmod_home = Path.home() / SYSMOD_HOME_EXT

    return sysmod_home / Path(*parts) if parts else sysmod_home
