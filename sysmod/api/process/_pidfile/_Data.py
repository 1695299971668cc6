"""pidfile process backend configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    """Launch module executables directly and track them with pid files."""

    model_config = ConfigDict(extra="forbid")

    executable: str = Field(..., description="Executable name inside each module directory (e.g., 'main')")
    args: list[str] = Field(default_factory=list, description="Extra arguments passed to the executable")
    state_dir: str = Field(..., description="Directory holding <HEX>.pid and <HEX>.log files")

    @field_validator("executable")
    @classmethod
    def validate_executable(cls, v: str) -> str:
        if not v or "/" in v:
            raise ValueError(f"process.data.executable must be a plain file name, got: {v!r}")
        return v

    @field_validator("state_dir")
    @classmethod
    def validate_state_dir(cls, v: str) -> str:
        if not v:
            raise ValueError("process.data.state_dir is required when process.type is 'pidfile'")
        return v
