"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from sysmod.api.config.SysmodConfig import SysmodConfig


def pytest_configure(config):
    for marker in ("unit", "integration", "smoke"):
        config.addinivalue_line("markers", f"{marker}: tests under tests/{marker}/")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(root: Path) -> dict:
    """Minimal valid sysmod configuration dict rooted at ``root``."""
    return {
        "contents": {
            "contents_dir": str(root / "contents"),
        },
        "process": {
            "type": "pidfile",
            "data": {
                "executable": "main",
                "args": [],
                "state_dir": str(root / "run"),
            },
        },
        "refresh": {
            "every_ticks": 20,
            "frame_secs": 0.001,
        },
        "log": {
            "level": "DEBUG",
            "debug_retention_days": 0.5,
            "info_retention_days": 1.0,
            "warning_retention_days": 2.0,
            "error_retention_days": 7.0,
        },
    }


def write_descriptor(contents_dir: Path, dirname: str, **fields: Any) -> Path:
    """Write ``<contents_dir>/<dirname>/toolbox.json`` and return the module directory."""
    module_dir = contents_dir / dirname
    module_dir.mkdir(parents=True, exist_ok=True)
    (module_dir / "toolbox.json").write_text(json.dumps(fields), encoding="utf-8")
    return module_dir


def write_module(contents_dir: Path, program_id: int, name: str, requires_reboot: bool = False) -> Path:
    """Write a well-formed descriptor in the directory named after the program id."""
    return write_descriptor(
        contents_dir,
        f"{program_id:016X}",
        tid=f"{program_id:016X}",
        name=name,
        requires_reboot=requires_reboot,
    )


# =============================================================================
# Fakes
# =============================================================================


class FakeProcessController:
    """In-memory stand-in for ProcessController.

    ``running`` holds the ids reported as live. Requests are recorded in
    ``calls``; ids in ``fail_start`` / ``fail_stop`` are not acknowledged.
    Acknowledged requests take effect immediately unless ``apply`` is False.
    """

    def __init__(self, *args, running: set[int] | None = None, **kwargs):
        self.running: set[int] = set(running or ())
        self.calls: list[tuple[str, int]] = []
        self.fail_start: set[int] = set()
        self.fail_stop: set[int] = set()
        self.apply = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def is_running(self, program_id: int) -> bool:
        self.calls.append(("is_running", program_id))
        return program_id in self.running

    def start(self, program_id: int) -> dict[str, Any]:
        self.calls.append(("start", program_id))
        if program_id in self.fail_start:
            return {"success": False, "error": "launch refused"}
        if self.apply:
            self.running.add(program_id)
        return {"success": True}

    def stop(self, program_id: int) -> dict[str, Any]:
        self.calls.append(("stop", program_id))
        if program_id in self.fail_stop:
            return {"success": False, "error": "terminate refused"}
        if self.apply:
            self.running.discard(program_id)
        return {"success": True}

    @property
    def mutations(self) -> list[tuple[str, int]]:
        return [call for call in self.calls if call[0] != "is_running"]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture(tmp_path: Path) -> dict:
    """Pytest fixture returning the minimal config dict rooted at tmp_path."""
    return minimal_config_dict(tmp_path)


@pytest.fixture
def minimal_sysmod_config(minimal_config_dict: dict) -> SysmodConfig:
    """SysmodConfig built from the minimal config dict."""
    return SysmodConfig(**minimal_config_dict)


@pytest.fixture
def contents_dir(tmp_path: Path) -> Path:
    path = tmp_path / "contents"
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def sysmod_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict, contents_dir: Path) -> Path:
    """Set up SYSMOD_HOME with a minimal config file.

    Returns:
        Path to the sysmod home directory
    """
    home = tmp_path / ".sysmod"
    home.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("SYSMOD_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict), encoding="utf-8")
    return home


@pytest.fixture
def fake_process(monkeypatch) -> FakeProcessController:
    """Replace the process controller used by module commands with an in-memory fake."""
    fake = FakeProcessController()
    monkeypatch.setattr("sysmod.api.module._Session.ProcessController", lambda *args, **kwargs: fake)
    return fake


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
