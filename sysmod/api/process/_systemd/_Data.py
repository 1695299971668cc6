"""systemd specific process backend configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    """systemd process backend configuration data."""

    model_config = ConfigDict(extra="forbid")

    unit_template: str = Field(
        "sysmodule@{hex_id}.service", description="Unit name template with a '{hex_id}' placeholder"
    )
    user: bool = Field(True, description="Talk to the per-user manager (systemctl --user)")

    @field_validator("unit_template")
    @classmethod
    def validate_unit_template(cls, v: str) -> str:
        if "{hex_id}" not in v:
            raise ValueError(f"process.data.unit_template must contain '{{hex_id}}', got: {v!r}")
        if not v.endswith(".service"):
            raise ValueError(
                f"process.data.unit_template must end with '.service' (e.g., 'sysmodule@{{hex_id}}.service'), got: {v!r}"
            )
        return v
