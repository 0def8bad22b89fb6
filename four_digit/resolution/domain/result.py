"""What a caller gets back from resolving a question."""

from pydantic import BaseModel, ConfigDict

from four_digit.current.domain.answer import AnswerSource


class ResolutionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int
    source: AnswerSource
