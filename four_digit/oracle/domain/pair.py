"""Structured output models requested from the LLM."""

from pydantic import BaseModel, ConfigDict, Field


class NumberResponse(BaseModel):
    """A single numeric answer. Non-finite values are rejected."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    number: float


class OraclePair(BaseModel):
    """One raw question/number pair exactly as the oracle produced it."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    question: str
    number: float


class QuestionPairsResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    pairs: list[OraclePair] = Field(default_factory=list)
