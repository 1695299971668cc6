"""Fields shared by every command output."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Errors and warnings are always present, possibly empty."""

    errors: list[str] = Field(default_factory=list, description="Failures the command hit; empty on success")
    warnings: list[str] = Field(
        default_factory=list, description="Non-fatal findings such as skipped descriptors or reboot notices"
    )
