"""Module autostart command - flip a module's start-at-boot flag."""

from collections.abc import Iterator

from .._output_schemas.module import ModuleAutostartOutput
from ..StageResult import StageResult
from ..toggle.ToggleAction import ToggleAction
from ._apply_action import _apply_action


def cmd_autostart(program_id: str) -> StageResult:
    """Toggle auto-start for a module without touching its process.

    Args:
        program_id: Hex program id of the module
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from _apply_action(result_obj, program_id, ToggleAction.AUTO_START, ModuleAutostartOutput)

    return StageResult(
        announce=f"Toggling auto-start for module {program_id}...",
        progress_callback=do_work,
    )
