"""Base exception class for all four-digit-specific errors."""


class FourDigitError(Exception):
    """Base class for all four-digit errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
