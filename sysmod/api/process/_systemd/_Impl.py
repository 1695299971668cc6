"""systemd process backend - one unit per module, driven through systemctl."""

import subprocess
from typing import Any

from ....utils.format_program_id import format_program_id
from ...config.ContentsConfig import ContentsConfig
from .._AbstractImpl import _AbstractImpl
from ..ProcessConfig import ProcessConfig
from ._Data import _Data


class _Impl(_AbstractImpl):
    """Process control through systemd units rendered from a template."""

    def __init__(self, process_config: ProcessConfig, contents: ContentsConfig):
        if not isinstance(process_config.data, _Data):
            raise ValueError("systemd process config data is required")
        self.config = process_config
        self.contents = contents
        self._data: _Data = process_config.data

    def unit_name(self, program_id: int) -> str:
        """Unit name for a module."""
        return self._data.unit_template.format(hex_id=format_program_id(program_id))

    def _systemctl(self, *args: str) -> subprocess.CompletedProcess:
        command = ["systemctl", "--user", *args] if self._data.user else ["systemctl", *args]
        return subprocess.run(command, capture_output=True, text=True, check=False)

    def get_pid(self, program_id: int) -> int:
        """Read MainPID of the module's unit (0 when not running)."""
        try:
            result = self._systemctl("show", self.unit_name(program_id), "--property=MainPID", "--value")
        except FileNotFoundError as e:
            raise RuntimeError("systemctl not found in PATH") from e
        if result.returncode != 0:
            raise RuntimeError(f"systemctl show failed: {result.stderr.strip()}")
        pid_str = result.stdout.strip()
        try:
            return int(pid_str) if pid_str else 0
        except ValueError as e:
            raise RuntimeError(f"Unexpected MainPID value: {pid_str!r}") from e

    def start(self, program_id: int) -> dict[str, Any]:
        """Start the module's unit without waiting for it to become ready."""
        unit = self.unit_name(program_id)
        try:
            result = self._systemctl("start", "--no-block", unit)
        except FileNotFoundError:
            return {"success": False, "error": "systemctl not found in PATH"}
        if result.returncode != 0:
            error_msg = result.stderr.strip() or "Unknown error"
            return {"success": False, "error": f"Failed to start {unit}: {error_msg}"}
        return {"success": True, "type": "systemd", "unit_name": unit}

    def stop(self, program_id: int) -> dict[str, Any]:
        """Stop the module's unit without waiting for it to exit."""
        unit = self.unit_name(program_id)
        try:
            result = self._systemctl("stop", "--no-block", unit)
        except FileNotFoundError:
            return {"success": False, "error": "systemctl not found in PATH"}
        if result.returncode != 0:
            error_msg = result.stderr.strip()
            # "not loaded" means there is nothing to stop - treat as success (idempotent)
            if "not loaded" in error_msg.lower() or "not found" in error_msg.lower():
                return {
                    "success": True,
                    "type": "systemd",
                    "unit_name": unit,
                    "note": "Unit was not running (already stopped).",
                }
            return {
                "success": False,
                "error": f"Failed to stop {unit}: {error_msg}" if error_msg else f"Failed to stop {unit}.",
            }
        return {"success": True, "type": "systemd", "unit_name": unit}
