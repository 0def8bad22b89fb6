"""LiteLLMOracle: oracle implementation using LiteLLM structured output."""

import time
from datetime import datetime

import litellm
from pydantic import BaseModel

from four_digit.config.domain.oracle import OracleConfig
from four_digit.oracle.domain.observer import OracleObserver
from four_digit.oracle.domain.pair import NumberResponse, OraclePair, QuestionPairsResponse
from four_digit.oracle.infrastructure.errors import OracleUnavailableError

_NUMBER_SYSTEM_PROMPT = """\
Respond with a single number that answers the question. VERY IMPORTANT: Always \
return a valid integer with at most 4 digits. If the true answer has more than \
4 digits, truncate it to 4 digits. The current year is {year}.
"""

_PAIRS_SYSTEM_PROMPT = """\
Generate exactly {count} esoteric and strange questions that can be answered with \
a specific number, together with that number. Include questions about history, \
nature, science, geography, art, and math. VERY IMPORTANT: Each question must \
have a clear numerical answer that is ALWAYS less than 4 digits. NEVER use more \
than 4 digits in the answer since the answer is shown on a four-digit display. \
Every question must be different. The current year is {year}.
"""

_PAIRS_USER_PROMPT = """\
Generate {count} questions with numeric answers of less than 4 digits. Be \
creative and think outside the box.
"""

_GENERATE_NUMBER = "generate_number"
_GENERATE_PAIRS = "generate_question_number_pairs"


class LiteLLMOracle:
    """Oracle implementation that delegates to an LLM via LiteLLM.

    A single instance serves the whole process; every call is independent.
    """

    def __init__(self, config: OracleConfig, observer: OracleObserver) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._observer = observer

    async def generate_number(self, question: str) -> float:
        """Ask the model for one number answering ``question``.

        Raises:
            OracleUnavailableError: if the LLM call fails or the reply is not
                a finite number.
        """
        result = await self._complete(
            operation=_GENERATE_NUMBER,
            response_model=NumberResponse,
            temperature=self._config.temperature,
            messages=[
                {
                    "role": "system",
                    "content": _NUMBER_SYSTEM_PROMPT.format(year=_current_year()),
                },
                {"role": "user", "content": question},
            ],
        )
        return result.number

    async def generate_question_number_pairs(self, count: int) -> list[OraclePair]:
        """Ask the model for ``count`` question/number pairs in one call.

        The returned list may be shorter or longer than ``count``; callers
        decide what to do about that.

        Raises:
            OracleUnavailableError: if the LLM call fails or the reply cannot
                be parsed.
        """
        year = _current_year()
        result = await self._complete(
            operation=_GENERATE_PAIRS,
            response_model=QuestionPairsResponse,
            temperature=self._config.batch_temperature,
            messages=[
                {
                    "role": "system",
                    "content": _PAIRS_SYSTEM_PROMPT.format(count=count, year=year),
                },
                {"role": "user", "content": _PAIRS_USER_PROMPT.format(count=count)},
            ],
        )
        return list(result.pairs)

    async def _complete[M: BaseModel](
        self,
        operation: str,
        response_model: type[M],
        temperature: float,
        messages: list[dict[str, str]],
    ) -> M:
        self._observer.oracle_call_started(
            operation=operation, model=self._config.model
        )

        start = time.monotonic()
        try:
            response = await litellm.acompletion(
                model=self._config.model,
                temperature=temperature,
                timeout=self._config.timeout_seconds,
                response_format=response_model,
                messages=messages,
            )
        except Exception as exc:
            reason = str(exc) or type(exc).__name__
            self._observer.oracle_call_failed(operation=operation, reason=reason)
            raise OracleUnavailableError(reason=reason) from exc

        duration_ms = int((time.monotonic() - start) * 1000)

        raw_content = response.choices[0].message.content
        try:
            result = response_model.model_validate_json(raw_content or "")
        except Exception as exc:
            reason = f"unparseable oracle response: {exc}"
            self._observer.oracle_call_failed(operation=operation, reason=reason)
            raise OracleUnavailableError(reason=reason) from exc

        self._observer.oracle_call_completed(
            operation=operation, duration_ms=duration_ms
        )
        return result


def _current_year() -> int:
    return datetime.now().year
