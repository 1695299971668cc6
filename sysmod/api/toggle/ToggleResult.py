"""Record of what a toggle action did."""

from dataclasses import dataclass, field
from typing import Any

from ...utils.format_program_id import format_program_id
from .ToggleAction import ToggleAction


@dataclass
class ToggleResult:
    """Steps issued by one action, in order, and the failures they hit.

    A step is listed once it was issued, whether or not it succeeded.
    """

    program_id: int
    action: ToggleAction
    steps: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    skipped: bool = False

    @property
    def success(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "program_id": format_program_id(self.program_id),
            "action": self.action.value,
            "steps": list(self.steps),
            "skipped": self.skipped,
        }
