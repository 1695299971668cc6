"""Output schemas for module commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ModuleListOutput(BaseOutputSchema):
    """Output schema for module list command.

    Each row carries program_id, name, requires_reboot, running, auto_start and label.
    """

    scanned: bool = Field(..., description="False when the contents directory could not be enumerated")
    message: str = Field(..., description="Empty-state message ('No sysmodules found!' / 'Scan failed!'), empty string otherwise")
    dynamic: list[dict[str, Any]] = Field(..., description="Modules that can be toggled at any time")
    static: list[dict[str, Any]] = Field(..., description="Modules that need a reboot to work")


class ModuleStatusOutput(BaseOutputSchema):
    """Output schema for module status command."""

    modules: list[dict[str, Any]] = Field(..., description="One row per reported module")
    log_errors: list[str] = Field(..., description="Unexpired ERROR entries from the logfile")


class ModuleToggleOutput(BaseOutputSchema):
    """Output schema for module toggle command."""

    program_id: str = Field(..., description="Hex program id the action targeted")
    action: str = Field(..., description="'primary' or 'auto_start'")
    steps: list[str] = Field(..., description="Issued steps in order: start, stop, set_flag, clear_flag")
    skipped: bool = Field(..., description="True when the module requires a reboot and the action did nothing")
    status: dict[str, Any] = Field(..., description="Freshly queried status after the action, empty dict on error")


class ModuleAutostartOutput(ModuleToggleOutput):
    """Output schema for module autostart command."""


class ModuleWatchOutput(BaseOutputSchema):
    """Output schema for module watch command."""

    ticks: int = Field(..., description="Frames run")
    refreshes: int = Field(..., description="Status batches taken")
    modules: list[dict[str, Any]] = Field(..., description="Statuses from the last batch")


register_output_schema("module", "list", ModuleListOutput)
register_output_schema("module", "status", ModuleStatusOutput)
register_output_schema("module", "toggle", ModuleToggleOutput)
register_output_schema("module", "autostart", ModuleAutostartOutput)
register_output_schema("module", "watch", ModuleWatchOutput)
