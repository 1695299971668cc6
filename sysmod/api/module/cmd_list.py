"""Module list command - discovered modules grouped by how they can be toggled."""

from collections.abc import Iterator

from .._output_schemas.module import ModuleListOutput
from ..config.SysmodConfig import SysmodConfig
from ..StageResult import StageResult
from ._module_row import _module_row
from ._Session import open_session


def cmd_list() -> StageResult:
    """List modules with their status.

    Dynamic modules can be started and stopped at any time; static modules
    need a reboot and only their auto-start flag can be toggled.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SysmodConfig.load()
            yield (0.3, "Scanning module descriptors...")
            with open_session(config) as session:
                yield (0.6, "Querying module status...")
                discovery = session.discovery
                dynamic = [_module_row(m, session.engine.status(m)) for m in discovery.dynamic]
                static = [_module_row(m, session.engine.status(m)) for m in discovery.static]
        except Exception as exc:
            yield (1.0, "Complete")
            result_obj.result = f"Error listing modules: {exc}"
            result_obj.output = ModuleListOutput(
                errors=[str(exc)],
                warnings=[],
                scanned=False,
                message=str(exc),
                dynamic=[],
                static=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        message = discovery.empty_message
        result_obj.result = message or f"Found {len(discovery.modules)} module(s)"
        result_obj.output = ModuleListOutput(
            errors=[] if discovery.scanned else [message],
            warnings=list(discovery.skipped),
            scanned=discovery.scanned,
            message=message,
            dynamic=dynamic,
            static=static,
        ).model_dump(mode="python")
        result_obj.success = discovery.scanned

    return StageResult(
        announce="Listing modules...",
        progress_callback=do_work,
    )
