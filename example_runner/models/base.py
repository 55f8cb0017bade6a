"""Base model configuration for runner settings."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable settings model, validated once when loaded."""

    model_config = ConfigDict(frozen=True, extra="forbid")
