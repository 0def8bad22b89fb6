"""HTTP server configuration model."""

from pydantic import BaseModel, Field


class ServerConfig(BaseModel, frozen=True):
    host: str = "0.0.0.0"
    port: int = Field(default=3116, ge=1, le=65535)
    allowed_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    batch_secret: str | None = None
    subscriber_queue_size: int = Field(default=32, ge=1)
