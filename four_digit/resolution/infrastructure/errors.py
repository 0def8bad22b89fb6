"""Error types raised by the resolution pipeline."""

from four_digit.core.errors import FourDigitError


class EmptyQuestionError(FourDigitError):
    """Raised when the question is empty after trimming."""

    def __init__(self) -> None:
        super().__init__("Failed to resolve question: question is required")
