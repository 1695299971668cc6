"""Result object returned by every ``cmd_*`` function."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Announcement, work generator and outcome of one command.

    Nothing runs until ``progress_callback`` is consumed. It yields
    ``(fraction, message)`` pairs and, before finishing, fills ``result``
    (one-line summary), ``output`` (schema-shaped dict) and ``success``.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
