"""Contents directory configuration (descriptors and auto-start flags)."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import MAX_PROGRAM_ID, RESERVED_PROGRAM_ID


class ContentsConfig(BaseModel):
    """Where module descriptors and flag markers live."""

    model_config = ConfigDict(extra="forbid")

    contents_dir: str = Field(..., description="Directory holding one subdirectory per module")
    descriptor_filename: str = Field("toolbox.json", description="Descriptor file name inside a module directory")
    flags_dirname: str = Field("flags", description="Flags subdirectory inside a module directory")
    flag_filename: str = Field("boot2.flag", description="Auto-start marker file name")
    reserved_program_id: int = Field(
        RESERVED_PROGRAM_ID, ge=0, le=MAX_PROGRAM_ID, description="Program id that is never manageable"
    )

    @field_validator("contents_dir")
    @classmethod
    def validate_contents_dir(cls, v: str) -> str:
        if not v:
            raise ValueError("contents.contents_dir is required")
        return v

    @field_validator("descriptor_filename", "flags_dirname", "flag_filename")
    @classmethod
    def validate_plain_name(cls, v: str) -> str:
        if not v or "/" in v or v in (".", ".."):
            raise ValueError(f"must be a plain file or directory name, got: {v!r}")
        return v

    @property
    def contents_path(self) -> Path:
        """Expanded contents directory."""
        return Path(self.contents_dir).expanduser()
