"""Strict schema of a module descriptor file (toolbox.json)."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

from ...utils.parse_program_id import parse_program_id
from .Module import Module


class ModuleDescriptor(BaseModel):
    """Parsed descriptor. Any missing or mistyped field fails validation."""

    model_config = ConfigDict(extra="ignore")

    tid: StrictStr = Field(..., description="Program id as a hex string (e.g., '0100000000000001')")
    name: StrictStr = Field(..., description="Display name")
    requires_reboot: StrictBool = Field(..., description="Whether the module only takes effect after a reboot")

    @field_validator("tid")
    @classmethod
    def validate_tid(cls, v: str) -> str:
        parse_program_id(v)
        return v

    @property
    def program_id(self) -> int:
        return parse_program_id(self.tid)

    def to_module(self) -> Module:
        return Module(program_id=self.program_id, display_name=self.name, requires_reboot=self.requires_reboot)
