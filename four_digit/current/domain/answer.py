"""Current answer domain value objects."""

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from four_digit.number.domain.normalizer import MAX_NUMBER, MIN_NUMBER


class AnswerSource(StrEnum):
    LIBRARY = "library"
    ORACLE = "oracle"


class CurrentAnswer(BaseModel):
    """The most recently resolved question. Exactly one is kept at a time."""

    model_config = ConfigDict(frozen=True)

    question: str = Field(min_length=1)
    number: int = Field(ge=MIN_NUMBER, le=MAX_NUMBER)
    source: AnswerSource
    timestamp: AwareDatetime


class CurrentAnswerView(BaseModel):
    """A current answer as handed to callers.

    ``auto_generated`` is True when no answer existed and one was seeded from
    a random library question to satisfy the read.
    """

    model_config = ConfigDict(frozen=True)

    answer: CurrentAnswer
    auto_generated: bool


def utc_now() -> datetime:
    return datetime.now(UTC)
