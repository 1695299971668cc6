"""Module registry - scans descriptor sources into the module set."""

import json
import os
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from ..config.ContentsConfig import ContentsConfig
from ..log.append_log import append_log
from .DiscoveryResult import DiscoveryResult
from .Module import Module
from .ModuleDescriptor import ModuleDescriptor


class ModuleRegistry:
    """Builds the list of known modules from descriptor files.

    Every subdirectory of the contents directory is a source; its descriptor
    lives at ``<entry>/<descriptor_filename>``. Scanning fails softly: a
    descriptor that cannot be read or parsed is skipped.
    """

    def __init__(self, contents: ContentsConfig, log_path: Path | None = None, log_level: str = "DEBUG"):
        self.contents = contents
        self.log_path = log_path
        self.log_level = log_level

    def _log(self, level: str, message: str) -> None:
        if self.log_path is not None:
            append_log(self.log_path, "module", level, message, min_level=self.log_level)

    def iter_sources(self) -> list[Path]:
        """Module directories in enumeration order (not sorted).

        Raises:
            OSError: If the contents directory cannot be enumerated
        """
        with os.scandir(self.contents.contents_path) as entries:
            return [Path(entry.path) for entry in entries if entry.is_dir()]

    def load_descriptor(self, source: Path) -> Module:
        """Read and validate one module directory's descriptor.

        Raises:
            OSError: If the descriptor cannot be read
            ValueError: If the descriptor is not valid JSON or does not match the schema
        """
        descriptor_path = source / self.contents.descriptor_filename
        raw = descriptor_path.read_text(encoding="utf-8")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"descriptor must be a JSON object, got {type(data).__name__}")
        try:
            return ModuleDescriptor(**data).to_module()
        except ValidationError as e:
            first = (e.errors() or [{"msg": str(e), "loc": ()}])[0]
            loc = ".".join(str(x) for x in first.get("loc", ()))
            detail = f"{loc}: {first.get('msg', str(e))}" if loc else first.get("msg", str(e))
            raise ValueError(detail) from e

    def discover(self, sources: Iterable[Path] | None = None) -> DiscoveryResult:
        """Scan sources and return the module set.

        Args:
            sources: Module directories to scan, in order. Defaults to the
                subdirectories of the contents directory.

        Returns:
            DiscoveryResult whose ``scanned`` is False only when the contents
            directory could not be enumerated.
        """
        if sources is None:
            try:
                sources = self.iter_sources()
            except OSError as e:
                self._log("ERROR", f"Cannot enumerate {self.contents.contents_path}: {e}")
                return DiscoveryResult(modules=[], scanned=False)

        modules: list[Module] = []
        seen: set[int] = set()
        skipped: list[str] = []

        for source in sources:
            try:
                module = self.load_descriptor(source)
            except FileNotFoundError:
                # Directories without a descriptor are not modules
                continue
            except (OSError, ValueError) as e:
                skipped.append(f"{source.name}: {e}")
                self._log("WARN", f"Skipping descriptor in {source}: {e}")
                continue

            if module.program_id == self.contents.reserved_program_id:
                self._log("DEBUG", f"Excluding reserved module {module.hex_id} ({module.display_name})")
                continue
            if module.program_id in seen:
                skipped.append(f"{source.name}: duplicate program id {module.hex_id}")
                self._log("WARN", f"Skipping duplicate program id {module.hex_id} in {source}")
                continue

            seen.add(module.program_id)
            modules.append(module)

        self._log("INFO", f"Discovered {len(modules)} module(s), skipped {len(skipped)}")
        return DiscoveryResult(modules=modules, scanned=True, skipped=skipped)
