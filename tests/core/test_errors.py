"""Tests verifying the FourDigitError type hierarchy."""

from pathlib import Path

import pytest

from four_digit.api.errors import BatchForbiddenError
from four_digit.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from four_digit.core.errors import FourDigitError
from four_digit.library.infrastructure.errors import EmptyStoreError
from four_digit.oracle.infrastructure.errors import OracleUnavailableError
from four_digit.resolution.infrastructure.errors import EmptyQuestionError
from four_digit.storage.infrastructure.errors import StorageWriteError


def _all_errors() -> list[FourDigitError]:
    return [
        EmptyQuestionError(),
        OracleUnavailableError(reason="timeout"),
        EmptyStoreError(),
        StorageWriteError(path=Path("/data/questions.json"), reason="disk full"),
        MissingEnvVarsError(missing_vars=["MY_VAR"]),
        ConfigValidationError(reason="bad value"),
        ConfigLoadError(path=Path("/some/config.yaml")),
        BatchForbiddenError(),
    ]


class TestFourDigitErrorHierarchy:
    """All four-digit-specific exceptions inherit from FourDigitError."""

    @pytest.mark.parametrize("error", _all_errors(), ids=lambda e: type(e).__name__)
    def test_is_four_digit_error(self, error: FourDigitError) -> None:
        assert isinstance(error, FourDigitError)

    @pytest.mark.parametrize("error", _all_errors(), ids=lambda e: type(e).__name__)
    def test_message_starts_with_failed(self, error: FourDigitError) -> None:
        assert str(error).startswith("Failed to ")

    def test_four_digit_error_is_exception(self) -> None:
        assert isinstance(FourDigitError("test"), Exception)


class TestRetriable:
    """Only upstream oracle failures are retriable."""

    def test_oracle_unavailable_is_retriable(self) -> None:
        assert OracleUnavailableError(reason="timeout").retriable is True

    def test_oracle_unavailable_message_includes_reason(self) -> None:
        assert "timeout" in str(OracleUnavailableError(reason="timeout"))

    def test_empty_question_is_not_retriable(self) -> None:
        assert EmptyQuestionError().retriable is False

    def test_empty_store_is_not_retriable(self) -> None:
        assert EmptyStoreError().retriable is False

    def test_missing_env_vars_lists_sorted_names(self) -> None:
        error = MissingEnvVarsError(missing_vars=["B_VAR", "A_VAR"])
        assert "A_VAR, B_VAR" in str(error)
