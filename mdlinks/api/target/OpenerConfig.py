"""Opener configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ._darwin._Data import _Data as _DarwinData
from ._linux._Data import _Data as _LinuxData
from ._test._Data import _Data as _TestData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "darwin": _DarwinData,
    "linux": _LinuxData,
    "test": _TestData,
}


class OpenerConfig(BaseModel):
    """Opener configuration with backend-specific data."""

    type: str = Field(..., description="Opener backend type")
    data: BaseModel = Field(..., description="Backend-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"opener config must be a dict, got {type(values).__name__}")
        backend_type = values.get("type")
        if not backend_type:
            raise ValueError("opener.type is required")
        config_data_class = _BACKEND_REGISTRY.get(backend_type)
        if not config_data_class:
            raise ValueError(f"Unknown opener type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data")
        if data is None:
            raise ValueError("opener.data is required")
        if not isinstance(data, config_data_class):
            data = config_data_class(**data)
        return {**values, "data": data}

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result
