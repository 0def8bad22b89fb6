"""Request and response bodies for the HTTP API."""

from pydantic import AwareDatetime, BaseModel, Field

from four_digit.current.domain.answer import AnswerSource
from four_digit.library.domain.entry import QAEntry


class ProcessQuestionRequest(BaseModel):
    question: str | None = Field(None, description="Free-text trivia question")


class ProcessQuestionResponse(BaseModel):
    success: bool = True
    number: int = Field(..., description="Answer in the range 1..9999")
    source: AnswerSource = Field(..., description="'library' or 'oracle'")


class CurrentNumberResponse(BaseModel):
    success: bool = True
    question: str
    number: int
    source: AnswerSource
    timestamp: AwareDatetime
    auto_generated: bool = Field(
        ..., description="True when the answer was seeded on this read"
    )


class SuggestedQuestionsResponse(BaseModel):
    success: bool = True
    questions: list[str]
    count: int


class GenerateQuestionsResponse(BaseModel):
    success: bool = True
    requested: int
    stored: int
    entries: list[QAEntry]


class HealthResponse(BaseModel):
    status: str = "ok"
    library_size: int
    subscribers: int


class ErrorResponse(BaseModel):
    error: str
    message: str
