"""Check if a process ID is running."""

import os


def _pid_running(pid: int) -> bool:
    """Check if a process ID is running.

    Exited children of this process are reaped first so they do not linger
    as zombies that still answer signal 0.

    Args:
        pid: Process ID to check

    Returns:
        True if process is running, False otherwise
    """
    if pid <= 0:
        return False
    try:
        reaped_pid, _status = os.waitpid(pid, os.WNOHANG)
        if reaped_pid == pid:
            return False
    except ChildProcessError:
        pass  # Not our child; fall through to signal 0
    except OSError:
        return False
    try:
        os.kill(pid, 0)
        return True
    except OSError:
        return False
