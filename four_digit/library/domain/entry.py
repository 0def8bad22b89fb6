"""Library value objects: stored question/number pairs and append outcomes."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from four_digit.number.domain.normalizer import MAX_NUMBER, MIN_NUMBER


class QAEntry(BaseModel):
    """Immutable question/number pair held by the library."""

    model_config = ConfigDict(frozen=True)

    question: str = Field(min_length=1)
    number: int = Field(ge=MIN_NUMBER, le=MAX_NUMBER)

    @property
    def key(self) -> str:
        return question_key(self.question)


class AppendOutcome(StrEnum):
    STORED = "stored"
    CAP_REACHED = "cap_reached"
    REJECTED = "rejected"
    DUPLICATE = "duplicate"


def question_key(question: str) -> str:
    """Uniqueness key for a question: trimmed and case-folded."""
    return question.strip().casefold()
