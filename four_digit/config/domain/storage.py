"""Storage configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field


class StorageConfig(BaseModel, frozen=True):
    data_dir: Path
    library_file: str = Field(default="questions.json", min_length=1)
    current_file: str = Field(default="current.json", min_length=1)

    @property
    def library_path(self) -> Path:
        return self.data_dir / self.library_file

    @property
    def current_path(self) -> Path:
        return self.data_dir / self.current_file
