"""Frame-driven status refresh."""

from .ModuleStatus import ModuleStatus
from .ToggleEngine import ToggleEngine


class RefreshTicker:
    """Refreshes every module's status once every ``every_ticks`` frames.

    The first tick always refreshes. Runs on the caller's thread; a tick
    returns as soon as the batch of queries completes.
    """

    def __init__(self, engine: ToggleEngine, every_ticks: int = 20):
        if every_ticks <= 0:
            raise ValueError(f"every_ticks must be positive, got {every_ticks}")
        self.engine = engine
        self.every_ticks = every_ticks
        self._counter = 0

    def tick(self) -> list[ModuleStatus] | None:
        """Advance one frame; return the refreshed statuses when due, else None."""
        due = self._counter % self.every_ticks == 0
        self._counter += 1
        if not due:
            return None
        return self.engine.refresh()
