"""Top-level AppConfig aggregate."""

from pydantic import BaseModel, Field

from four_digit.config.domain.library import LibraryConfig
from four_digit.config.domain.oracle import OracleConfig
from four_digit.config.domain.server import ServerConfig
from four_digit.config.domain.storage import StorageConfig


class AppConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a four-digit service."""

    name: str = Field(min_length=1)
    oracle: OracleConfig
    storage: StorageConfig
    library: LibraryConfig = Field(default_factory=LibraryConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
