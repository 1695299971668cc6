"""Module value entity."""

from dataclasses import dataclass

from ...utils.format_program_id import format_program_id


@dataclass(frozen=True)
class Module:
    """A manageable system module discovered from its descriptor."""

    program_id: int
    """64-bit identifier; key for every process and flag operation."""

    display_name: str
    """Human-readable name."""

    requires_reboot: bool
    """Only effective through the auto-start flag; cannot be started or stopped live."""

    @property
    def hex_id(self) -> str:
        return format_program_id(self.program_id)
