"""Outcome of a registry scan."""

from dataclasses import dataclass, field

from .Module import Module

NO_MODULES_MESSAGE = "No sysmodules found!"
SCAN_FAILED_MESSAGE = "Scan failed!"


@dataclass
class DiscoveryResult:
    """Modules found by a scan, in source enumeration order."""

    modules: list[Module]
    """Discovered modules, reserved id excluded."""

    scanned: bool
    """False when the contents directory itself could not be enumerated."""

    skipped: list[str] = field(default_factory=list)
    """One message per descriptor that was skipped."""

    def get(self, program_id: int) -> Module | None:
        for module in self.modules:
            if module.program_id == program_id:
                return module
        return None

    @property
    def empty_message(self) -> str:
        """Message for an empty registry, or '' when modules were found."""
        if self.modules:
            return ""
        return NO_MODULES_MESSAGE if self.scanned else SCAN_FAILED_MESSAGE

    @property
    def dynamic(self) -> list[Module]:
        """Modules that can be started and stopped live."""
        return [m for m in self.modules if not m.requires_reboot]

    @property
    def static(self) -> list[Module]:
        """Modules that need a reboot to take effect."""
        return [m for m in self.modules if m.requires_reboot]
