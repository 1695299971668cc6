"""Module toggle command - start or stop a module (primary toggle)."""

from collections.abc import Iterator

from .._output_schemas.module import ModuleToggleOutput
from ..StageResult import StageResult
from ..toggle.ToggleAction import ToggleAction
from ._apply_action import _apply_action


def cmd_toggle(program_id: str) -> StageResult:
    """Start a stopped module or stop a running one.

    Starting also sets the auto-start flag when it is missing; stopping
    clears it when it is present. Reboot-required modules are left unchanged.

    Args:
        program_id: Hex program id of the module
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from _apply_action(result_obj, program_id, ToggleAction.PRIMARY, ModuleToggleOutput)

    return StageResult(
        announce=f"Toggling module {program_id}...",
        progress_callback=do_work,
    )
