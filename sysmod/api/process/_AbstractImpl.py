"""Abstract base class for process backend implementations."""

from abc import ABC, abstractmethod
from typing import Any


class _AbstractImpl(ABC):
    """Abstract base class for backend-specific process control.

    Start and stop requests do not wait for the process to become ready or to
    exit; callers observe the outcome by querying the pid on a later refresh.
    """

    @abstractmethod
    def get_pid(self, program_id: int) -> int:
        """Return the live process id for a module, or 0 if none.

        Raises:
            RuntimeError: If the process service cannot be queried
        """
        pass

    @abstractmethod
    def start(self, program_id: int) -> dict[str, Any]:
        """Request that a module's process be launched.

        Returns:
            Dictionary with required 'success' field, and 'error' when success is False
        """
        pass

    @abstractmethod
    def stop(self, program_id: int) -> dict[str, Any]:
        """Request that a module's process be terminated.

        Returns:
            Dictionary with required 'success' field, and 'error' when success is False
        """
        pass
