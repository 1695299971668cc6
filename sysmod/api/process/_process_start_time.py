"""Creation time of a process, used to tell a pid's owner apart from a later reuse."""

import psutil


def _process_start_time(pid: int) -> str | None:
    """Creation time of ``pid`` rendered for storage next to the pid.

    Together with the pid this identifies one process; a reused pid has a
    different creation time.

    Returns:
        Seconds since the epoch with two decimals, or None when the process
        cannot be inspected
    """
    try:
        return f"{psutil.Process(pid).create_time():.2f}"
    except psutil.Error:
        return None
