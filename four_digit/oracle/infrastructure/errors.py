"""Error types raised by oracle infrastructure."""

from four_digit.core.errors import FourDigitError


class OracleUnavailableError(FourDigitError):
    """Raised when the oracle cannot be reached or returns unusable output."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to consult oracle: {reason}", retriable=True)
