"""Toggle module - running/auto-start state machine for modules."""

from .ModuleStatus import ModuleStatus
from .STATUS_LABELS import STATUS_LABELS
from .ToggleAction import ToggleAction
from .ToggleResult import ToggleResult

__all__ = ["STATUS_LABELS", "ModuleStatus", "ToggleAction", "ToggleResult"]
