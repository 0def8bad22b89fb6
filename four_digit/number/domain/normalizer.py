"""Folds any finite number into the 1..9999 display range."""

import math

MIN_NUMBER = 1
MAX_NUMBER = 9999


def normalize_number(raw: float) -> int:
    """Return ``raw`` as an integer in [1, 9999].

    Takes the absolute value and floors it; ints of any size are exact. Zero becomes 1; anything above
    9999 wraps to ``(n mod 9999) + 1``. Sign is discarded, never preserved.

    Raises:
        ValueError: if ``raw`` is NaN or infinite.
    """
    if isinstance(raw, float) and not math.isfinite(raw):
        raise ValueError(f"cannot normalize non-finite number: {raw!r}")

    number = math.floor(abs(raw))
    if number == 0:
        return MIN_NUMBER
    if number > MAX_NUMBER:
        return (number % MAX_NUMBER) + 1
    return number
