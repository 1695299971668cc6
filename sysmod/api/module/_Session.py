"""Per-command session: config, discovered modules and a ready toggle engine."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from ..config.SysmodConfig import SysmodConfig
from ..flag.FlagStore import FlagStore
from ..process.ProcessController import ProcessController
from ..toggle.ToggleEngine import ToggleEngine
from .DiscoveryResult import DiscoveryResult
from .ModuleRegistry import ModuleRegistry


@dataclass
class _Session:
    config: SysmodConfig
    discovery: DiscoveryResult
    engine: ToggleEngine
    log_path: Path


@contextmanager
def open_session(config: SysmodConfig) -> Iterator[_Session]:
    """Discover modules once and wire the engine to the configured backends."""
    log_path = SysmodConfig.get_logfile_path()
    registry = ModuleRegistry(config.contents, log_path=log_path, log_level=config.log.level)
    discovery = registry.discover()
    flags = FlagStore(config.contents)
    with ProcessController(config.process, config.contents) as process:
        engine = ToggleEngine(discovery.modules, process, flags, log_path=log_path, log_level=config.log.level)
        yield _Session(config=config, discovery=discovery, engine=engine, log_path=log_path)
