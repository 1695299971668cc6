"""Module domain - registry of manageable system modules and their commands."""

from .DiscoveryResult import DiscoveryResult
from .Module import Module
from .ModuleDescriptor import ModuleDescriptor
from .ModuleRegistry import ModuleRegistry

__all__ = ["DiscoveryResult", "Module", "ModuleDescriptor", "ModuleRegistry"]
