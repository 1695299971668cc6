"""Shared body of the toggle and autostart commands."""

from collections.abc import Iterator

from ...utils.parse_program_id import parse_program_id
from .._output_schemas.module import ModuleToggleOutput
from ..config.SysmodConfig import SysmodConfig
from ..StageResult import StageResult
from ..toggle.ToggleAction import ToggleAction
from ._Session import open_session


def _apply_action(
    result_obj: StageResult,
    program_id: str,
    action: ToggleAction,
    output_class: type[ModuleToggleOutput],
) -> Iterator[tuple[float, str]]:
    """Dispatch one action and report the module's freshly queried state."""
    yield (0.1, "Loading configuration...")
    try:
        config = SysmodConfig.load()
        pid = parse_program_id(program_id)
        yield (0.3, "Scanning module descriptors...")
        with open_session(config) as session:
            yield (0.5, f"Applying {action.value} toggle...")
            toggle = session.engine.dispatch(pid, action)
            yield (0.8, "Refreshing status...")
            module = session.engine.get(pid)
            status = session.engine.status(module)  # type: ignore[arg-type]
    except Exception as exc:
        # KeyError wraps its message in quotes
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else str(exc)
        yield (1.0, "Complete")
        result_obj.result = f"Error applying {action.value} toggle to {program_id}: {message}"
        result_obj.output = output_class(
            errors=[message],
            warnings=[],
            program_id=program_id,
            action=action.value,
            steps=[],
            skipped=False,
            status={},
        ).model_dump(mode="python")
        result_obj.success = False
        return

    warnings: list[str] = []
    if toggle.skipped:
        warnings.append(f"{module.display_name} requires a reboot; only auto-start can be toggled")

    yield (1.0, "Complete")
    if toggle.errors:
        result_obj.result = f"{module.display_name}: {action.value} toggle failed ({status.label})"
    elif toggle.skipped:
        result_obj.result = f"{module.display_name}: no change ({status.label})"
    else:
        result_obj.result = f"{module.display_name}: {status.label}"
    result_obj.output = output_class(
        errors=list(toggle.errors),
        warnings=warnings,
        status=status.to_dict(),
        **toggle.to_dict(),
    ).model_dump(mode="python")
    result_obj.success = toggle.success
