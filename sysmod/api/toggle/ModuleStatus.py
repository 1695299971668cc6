"""Derived status of one module at one refresh."""

from dataclasses import asdict, dataclass
from typing import Any

from ...utils.format_program_id import format_program_id
from .STATUS_LABELS import STATUS_LABELS


@dataclass(frozen=True)
class ModuleStatus:
    program_id: int
    running: bool
    auto_start: bool

    @property
    def label(self) -> str:
        return STATUS_LABELS[(self.running, self.auto_start)]

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["program_id"] = format_program_id(self.program_id)
        data["label"] = self.label
        return data
