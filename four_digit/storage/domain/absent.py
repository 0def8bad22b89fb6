"""Explicit "nothing loaded" result for repository reads."""

from pydantic import BaseModel


class Absent(BaseModel, frozen=True):
    """Returned instead of data when a backing resource is missing or corrupt."""

    reason: str
