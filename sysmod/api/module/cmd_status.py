"""Module status command - current (running, auto-start) of one or all modules."""

from collections.abc import Iterator

from ...utils.parse_program_id import parse_program_id
from .._output_schemas.module import ModuleStatusOutput
from ..config.SysmodConfig import SysmodConfig
from ..log.read_log_entries import read_log_entries
from ..StageResult import StageResult
from ._module_row import _module_row
from ._Session import open_session


def cmd_status(program_id: str = "") -> StageResult:
    """Get module status.

    Args:
        program_id: Hex program id. Empty string reports every module.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        errors: list[str] = []
        try:
            config = SysmodConfig.load()
            wanted = parse_program_id(program_id) if program_id else None
            yield (0.3, "Scanning module descriptors...")
            with open_session(config) as session:
                modules = session.discovery.modules
                if wanted is not None:
                    module = session.discovery.get(wanted)
                    if module is None:
                        errors.append(f"Unknown module {program_id}")
                    modules = [module] if module is not None else []
                yield (0.6, "Querying module status...")
                rows = [_module_row(m, session.engine.status(m)) for m in modules]
                if not session.discovery.scanned:
                    errors.append(session.discovery.empty_message)
            yield (0.8, "Reading log...")
            warnings, log_errors = read_log_entries(SysmodConfig.get_logfile_path(), config.log)
        except Exception as exc:
            yield (1.0, "Complete")
            result_obj.result = f"Error checking module status: {exc}"
            result_obj.output = ModuleStatusOutput(
                errors=[str(exc)],
                warnings=[],
                modules=[],
                log_errors=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Status of {len(rows)} module(s) retrieved" if not errors else errors[0]
        result_obj.output = ModuleStatusOutput(
            errors=errors,
            warnings=warnings,
            modules=rows,
            log_errors=log_errors,
        ).model_dump(mode="python")
        result_obj.success = len(errors) == 0

    announce = "Checking module status..." if not program_id else f"Checking status of module {program_id}..."
    return StageResult(announce=announce, progress_callback=do_work)
