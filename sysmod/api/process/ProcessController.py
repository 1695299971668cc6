"""Process controller public API - queries, starts and stops module processes."""

from typing import Any

from ..config.ContentsConfig import ContentsConfig
from ._AbstractImpl import _AbstractImpl
from .ProcessConfig import _BACKEND_REGISTRY, ProcessConfig


class ProcessController:
    """Public API for process operations, backed by a configured implementation."""

    def __init__(self, process_config: ProcessConfig, contents: ContentsConfig):
        self.process_config = process_config
        self.contents = contents
        self._impl: _AbstractImpl | None = None

    def __enter__(self):
        backend_type = self.process_config.type

        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Import implementation class directly from backend _Impl module
        module = __import__(f"sysmod.api.process._{backend_type}._Impl", fromlist=[""])
        impl_class = module._Impl
        self._impl = impl_class(self.process_config, self.contents)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Implementations hold no resources, but we keep the pattern for consistency
        return False

    def _require_impl(self) -> _AbstractImpl:
        if not self._impl:
            raise RuntimeError("ProcessController not initialized. Use as context manager first.")
        return self._impl

    def is_running(self, program_id: int) -> bool:
        """Whether the backend reports a live pid (> 0). Query failures read as False."""
        impl = self._require_impl()
        try:
            return impl.get_pid(program_id) > 0
        except Exception:
            return False

    def start(self, program_id: int) -> dict[str, Any]:
        """Request a process launch.

        Returns:
            Dictionary with 'success' and, on failure, 'error'
        """
        return self._checked(self._require_impl().start, program_id, "start")

    def stop(self, program_id: int) -> dict[str, Any]:
        """Request process termination.

        Returns:
            Dictionary with 'success' and, on failure, 'error'
        """
        return self._checked(self._require_impl().stop, program_id, "stop")

    @staticmethod
    def _checked(operation, program_id: int, name: str) -> dict[str, Any]:
        try:
            result = operation(program_id)
        except Exception as exc:
            return {"success": False, "error": f"{name} failed: {exc}"}
        if "success" not in result:
            raise KeyError(f"{name}() result missing required 'success' field")
        if not result["success"] and "error" not in result:
            raise KeyError(f"{name}() result missing required 'error' field when success=False")
        return result
