"""Error types raised by library infrastructure."""

from four_digit.core.errors import FourDigitError


class EmptyStoreError(FourDigitError):
    """Raised when the library holds no questions to draw from."""

    def __init__(self) -> None:
        super().__init__(
            "Failed to draw questions: the library is empty, run batch generation first"
        )
