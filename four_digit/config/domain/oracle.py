"""Oracle configuration model."""

from pydantic import BaseModel, Field


class OracleConfig(BaseModel, frozen=True):
    model: str = Field(min_length=1)
    temperature: float = Field(default=0.0, ge=0.0)
    batch_temperature: float = Field(default=0.9, ge=0.0)
    timeout_seconds: float = Field(default=30.0, gt=0.0)
