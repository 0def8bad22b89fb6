"""Library configuration model."""

from pydantic import BaseModel, Field


class LibraryConfig(BaseModel, frozen=True):
    capacity: int = Field(default=1000, ge=1)
    batch_size: int = Field(default=25, ge=1)
