from typing import Any

from ..toggle.ModuleStatus import ModuleStatus
from .Module import Module


def _module_row(module: Module, status: ModuleStatus) -> dict[str, Any]:
    """Flatten a module and its status into one output row."""
    return {
        "program_id": module.hex_id,
        "name": module.display_name,
        "requires_reboot": module.requires_reboot,
        "running": status.running,
        "auto_start": status.auto_start,
        "label": status.label,
    }
