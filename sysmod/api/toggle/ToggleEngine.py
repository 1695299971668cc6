"""Toggle engine - reconciles operator actions with process and flag state."""

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Protocol

from ...utils.format_program_id import format_program_id
from ..flag.FlagStore import FlagStore
from ..log.append_log import append_log
from ..module.Module import Module
from .ModuleStatus import ModuleStatus
from .ToggleAction import ToggleAction
from .ToggleResult import ToggleResult


class _Process(Protocol):
    def is_running(self, program_id: int) -> bool: ...

    def start(self, program_id: int) -> dict[str, Any]: ...

    def stop(self, program_id: int) -> dict[str, Any]: ...


class ToggleEngine:
    """State machine over (running, auto_start) for a fixed module set.

    The engine keeps no pending state: every decision is made on freshly
    queried truth, and every mutation is best effort. A failed step leaves
    the state unchanged, which the next refresh shows.
    """

    def __init__(
        self,
        modules: Iterable[Module],
        process: _Process,
        flags: FlagStore,
        log_path: Path | None = None,
        log_level: str = "DEBUG",
    ):
        self._modules: dict[int, Module] = {m.program_id: m for m in modules}
        self.process = process
        self.flags = flags
        self.log_path = log_path
        self.log_level = log_level

    @property
    def modules(self) -> list[Module]:
        return list(self._modules.values())

    def get(self, program_id: int) -> Module | None:
        return self._modules.get(program_id)

    def _log(self, level: str, message: str) -> None:
        if self.log_path is not None:
            append_log(self.log_path, "toggle", level, message, min_level=self.log_level)

    def status(self, module: Module) -> ModuleStatus:
        """Query running and auto-start state. Pure read."""
        return ModuleStatus(
            program_id=module.program_id,
            running=self.process.is_running(module.program_id),
            auto_start=self.flags.has_auto_start(module.program_id),
        )

    def refresh(self) -> list[ModuleStatus]:
        """Statuses of all modules, in registry order, as one batch."""
        return [self.status(module) for module in self._modules.values()]

    def dispatch(self, program_id: int, action: ToggleAction | str) -> ToggleResult:
        """Apply an operator action to the module with the given id.

        Raises:
            KeyError: If no module with that id is registered
            ValueError: If the action is unknown
        """
        module = self.get(program_id)
        if module is None:
            raise KeyError(f"Unknown module {format_program_id(program_id)}")
        action = ToggleAction(action)
        if action is ToggleAction.PRIMARY:
            return self.primary_toggle(module)
        return self.auto_start_toggle(module)

    def primary_toggle(self, module: Module) -> ToggleResult:
        """Start or stop the module, then reconcile its auto-start flag.

        Stopping clears the flag only if it was set; starting sets it only if
        it was not. The process is always mutated before the flag.
        """
        result = ToggleResult(program_id=module.program_id, action=ToggleAction.PRIMARY)
        if module.requires_reboot:
            result.skipped = True
            self._log("DEBUG", f"{module.hex_id}: primary toggle ignored, module requires reboot")
            return result

        program_id = module.program_id
        if self.process.is_running(program_id):
            result.steps.append("stop")
            if not self._acknowledged(result, module, "stop", self.process.stop(program_id)):
                return result
            if self.flags.has_auto_start(program_id):
                self._set_flag(result, module, False)
        else:
            result.steps.append("start")
            if not self._acknowledged(result, module, "start", self.process.start(program_id)):
                return result
            if not self.flags.has_auto_start(program_id):
                self._set_flag(result, module, True)
        return result

    def auto_start_toggle(self, module: Module) -> ToggleResult:
        """Flip the auto-start flag. Never touches the process."""
        result = ToggleResult(program_id=module.program_id, action=ToggleAction.AUTO_START)
        self._set_flag(result, module, not self.flags.has_auto_start(module.program_id))
        return result

    def _acknowledged(self, result: ToggleResult, module: Module, step: str, outcome: dict[str, Any]) -> bool:
        if outcome.get("success"):
            self._log("INFO", f"{module.hex_id}: {step} requested ({module.display_name})")
            return True
        error = outcome.get("error") or f"{step} was not acknowledged"
        result.errors.append(f"{step}: {error}")
        self._log("ERROR", f"{module.hex_id}: {step} failed: {error}")
        return False

    def _set_flag(self, result: ToggleResult, module: Module, enabled: bool) -> None:
        step = "set_flag" if enabled else "clear_flag"
        result.steps.append(step)
        try:
            self.flags.set_auto_start(module.program_id, enabled)
        except OSError as e:
            result.errors.append(f"{step}: {e}")
            self._log("ERROR", f"{module.hex_id}: {step} failed: {e}")
            return
        self._log("INFO", f"{module.hex_id}: auto-start {'enabled' if enabled else 'disabled'} ({module.display_name})")
