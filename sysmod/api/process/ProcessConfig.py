"""Process backend configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ._pidfile._Data import _Data as _PidfileData
from ._systemd._Data import _Data as _SystemdData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "systemd": _SystemdData,
    "pidfile": _PidfileData,
}


class ProcessConfig(BaseModel):
    """Process backend configuration with backend-specific data."""

    type: str = Field(..., description="Process backend type")
    data: BaseModel = Field(..., description="Backend-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"process config must be a dict, got {type(values).__name__}")
        backend_type = values.get("type")
        if not backend_type:
            raise ValueError("process.type is required")
        config_data_class = _BACKEND_REGISTRY.get(backend_type)
        if not config_data_class:
            raise ValueError(f"Unknown process type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data")
        if data is None:
            raise ValueError("process.data is required")
        values = dict(values)
        values["data"] = data if isinstance(data, config_data_class) else config_data_class(**data)
        return values

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        # Explicitly serialize the data field since it's typed as BaseModel
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result
