"""Error types raised by the HTTP layer."""

from four_digit.core.errors import FourDigitError


class BatchForbiddenError(FourDigitError):
    """Raised when batch generation is requested without the shared secret."""

    def __init__(self) -> None:
        super().__init__("Failed to authorize batch generation: invalid or missing secret")
