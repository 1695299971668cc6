"""Module watch command - drive the frame ticker and report each status batch."""

import time
from collections.abc import Iterator

from .._output_schemas.module import ModuleWatchOutput
from ..config.SysmodConfig import SysmodConfig
from ..StageResult import StageResult
from ..toggle.RefreshTicker import RefreshTicker
from ._Session import open_session


def cmd_watch(ticks: int = 60) -> StageResult:
    """Run the refresh ticker for a number of frames.

    Statuses are refreshed as one batch every ``refresh.every_ticks`` frames,
    with ``refresh.frame_secs`` between frames.

    Args:
        ticks: Number of frames to run
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.0, "Loading configuration...")
        try:
            if ticks <= 0:
                raise ValueError(f"ticks must be positive, got {ticks}")
            config = SysmodConfig.load()
            refreshes = 0
            rows: list[dict] = []
            with open_session(config) as session:
                names = {m.program_id: m.display_name for m in session.discovery.modules}
                ticker = RefreshTicker(session.engine, every_ticks=config.refresh.every_ticks)
                for frame in range(ticks):
                    statuses = ticker.tick()
                    if statuses is not None:
                        refreshes += 1
                        rows = [{"name": names[s.program_id], **s.to_dict()} for s in statuses]
                        summary = ", ".join(f"{r['name']}: {r['label']}" for r in rows) or "no modules"
                        yield ((frame + 1) / ticks, summary)
                    if frame + 1 < ticks:
                        time.sleep(config.refresh.frame_secs)
        except Exception as exc:
            yield (1.0, "Complete")
            result_obj.result = f"Error watching modules: {exc}"
            result_obj.output = ModuleWatchOutput(
                errors=[str(exc)],
                warnings=[],
                ticks=0,
                refreshes=0,
                modules=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Watched {ticks} frame(s), {refreshes} refresh(es)"
        result_obj.output = ModuleWatchOutput(
            errors=[],
            warnings=[],
            ticks=ticks,
            refreshes=refreshes,
            modules=rows,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Watching modules for {ticks} frame(s)...",
        progress_callback=do_work,
    )
