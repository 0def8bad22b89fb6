"""Error types raised by storage infrastructure."""

from pathlib import Path

from four_digit.core.errors import FourDigitError


class StorageWriteError(FourDigitError):
    """Raised when a JSON file cannot be written durably."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")
