"""The message pushed to every display client."""

from typing import Literal

from pydantic import AwareDatetime, BaseModel, ConfigDict

from four_digit.current.domain.answer import AnswerSource, CurrentAnswer


class NumberUpdate(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["number-update"] = "number-update"
    number: int
    question: str
    source: AnswerSource
    timestamp: AwareDatetime

    @classmethod
    def from_answer(cls, answer: CurrentAnswer) -> "NumberUpdate":
        return cls(
            number=answer.number,
            question=answer.question,
            source=answer.source,
            timestamp=answer.timestamp,
        )
