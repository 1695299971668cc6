"""pidfile process backend - detached child processes tracked by pid files."""

import os
import signal
import subprocess
from pathlib import Path
from typing import Any

from ....utils.format_program_id import format_program_id
from ...config.ContentsConfig import ContentsConfig
from .._AbstractImpl import _AbstractImpl
from .._pid_running import _pid_running
from .._process_start_time import _process_start_time
from ..ProcessConfig import ProcessConfig
from ._Data import _Data


class _Impl(_AbstractImpl):
    """Runs ``<contents>/<HEX>/<executable>`` detached and records its pid.

    The pid file holds the pid and, when it can be read, the process
    creation time on a second line. The file stays until the recorded process
    is gone, so a module that ignores SIGTERM still reads as running.
    """

    def __init__(self, process_config: ProcessConfig, contents: ContentsConfig):
        if not isinstance(process_config.data, _Data):
            raise ValueError("pidfile process config data is required")
        self.config = process_config
        self.contents = contents
        self._data: _Data = process_config.data

    @property
    def state_dir(self) -> Path:
        return Path(self._data.state_dir).expanduser()

    def _pid_path(self, program_id: int) -> Path:
        return self.state_dir / f"{format_program_id(program_id)}.pid"

    def _log_path(self, program_id: int) -> Path:
        return self.state_dir / f"{format_program_id(program_id)}.log"

    def _executable_path(self, program_id: int) -> Path:
        return self.contents.contents_path / format_program_id(program_id) / self._data.executable

    def _read_pid_file(self, pid_path: Path) -> tuple[int, str | None]:
        lines = pid_path.read_text().split()
        try:
            pid = int(lines[0]) if lines else 0
        except ValueError as e:
            raise RuntimeError(f"Invalid pid file content in {pid_path}") from e
        return pid, (lines[1] if len(lines) > 1 else None)

    def get_pid(self, program_id: int) -> int:
        """Pid recorded for the module if that same process is still alive, else 0.

        A pid file whose process has exited, or whose pid now belongs to a
        different process, is removed.
        """
        pid_path = self._pid_path(program_id)
        if not pid_path.exists():
            return 0
        pid, recorded_start = self._read_pid_file(pid_path)
        if _pid_running(pid):
            current_start = _process_start_time(pid)
            if recorded_start is None or current_start is None or current_start == recorded_start:
                return pid
        pid_path.unlink(missing_ok=True)
        return 0

    def start(self, program_id: int) -> dict[str, Any]:
        """Launch the module executable in its own session."""
        existing = self.get_pid(program_id)
        if existing > 0:
            return {"success": True, "type": "pidfile", "pid": existing, "note": "Process was already running."}

        executable = self._executable_path(program_id)
        if not executable.is_file():
            return {"success": False, "error": f"Executable not found at {executable}"}

        self.state_dir.mkdir(parents=True, exist_ok=True)
        try:
            with self._log_path(program_id).open("ab") as log_fh:
                proc = subprocess.Popen(
                    [str(executable), *self._data.args],
                    cwd=str(executable.parent),
                    stdin=subprocess.DEVNULL,
                    stdout=log_fh,
                    stderr=log_fh,
                    start_new_session=True,  # Detach from parent process group
                )
        except OSError as e:
            return {"success": False, "error": f"Failed to launch {executable}: {e}"}

        start_time = _process_start_time(proc.pid)
        content = f"{proc.pid}\n{start_time}\n" if start_time else f"{proc.pid}\n"
        try:
            self._pid_path(program_id).write_text(content, encoding="utf-8")
        except OSError as e:
            proc.kill()
            proc.wait()
            return {"success": False, "error": f"Failed to record pid of {executable}: {e}"}
        return {"success": True, "type": "pidfile", "pid": proc.pid}

    def stop(self, program_id: int) -> dict[str, Any]:
        """Send SIGTERM to the recorded process.

        The pid file is kept; ``get_pid`` drops it once the process is gone.
        """
        try:
            pid = self.get_pid(program_id)
        except RuntimeError:
            self._pid_path(program_id).unlink(missing_ok=True)
            pid = 0
        if pid <= 0:
            return {"success": True, "type": "pidfile", "note": "Process was not running (already stopped)."}

        try:
            os.kill(pid, signal.SIGTERM)
        except ProcessLookupError:
            pass  # Exited since the check; the next query drops the pid file
        except PermissionError as e:
            return {"success": False, "error": f"Not permitted to stop pid {pid}: {e}"}
        return {"success": True, "type": "pidfile", "pid": pid}
