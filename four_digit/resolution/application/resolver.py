"""Orchestrates library lookup, oracle fallback, state and broadcast."""

import asyncio
from collections.abc import Callable
from datetime import datetime

from four_digit.broadcast.application.broadcaster import Broadcaster
from four_digit.broadcast.domain.message import NumberUpdate
from four_digit.current.application.current_answer_store import CurrentAnswerStore
from four_digit.current.domain.answer import (
    AnswerSource,
    CurrentAnswer,
    CurrentAnswerView,
    utc_now,
)
from four_digit.library.application.question_store import QuestionStore
from four_digit.library.infrastructure.errors import EmptyStoreError
from four_digit.number.domain.normalizer import normalize_number
from four_digit.oracle.domain.oracle import Oracle
from four_digit.resolution.domain.observer import ResolutionObserver
from four_digit.resolution.domain.result import ResolutionResult
from four_digit.resolution.infrastructure.errors import EmptyQuestionError


class QuestionResolver:
    """Turns a question into a number and makes it the current answer.

    The resolver owns no I/O of its own; it receives the store, state,
    oracle and broadcaster so each can be replaced in tests.

    Each resolution runs as its own task. A caller that is cancelled while
    waiting does not cancel the append, state write or broadcast.
    """

    def __init__(
        self,
        store: QuestionStore,
        current: CurrentAnswerStore,
        oracle: Oracle,
        broadcaster: Broadcaster,
        observer: ResolutionObserver,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._current = current
        self._oracle = oracle
        self._broadcaster = broadcaster
        self._observer = observer
        self._clock = clock
        self._in_flight: set[asyncio.Task[CurrentAnswer]] = set()
        self._seed_lock = asyncio.Lock()

    async def resolve(self, raw_question: str) -> ResolutionResult:
        """Resolve a user question.

        Raises:
            EmptyQuestionError: if the question is blank after trimming.
            OracleUnavailableError: if the library misses and the oracle fails.
                Nothing is stored, written or broadcast in that case.
        """
        question = raw_question.strip()
        if not question:
            raise EmptyQuestionError()
        answer = await self._run_detached(question)
        return ResolutionResult(number=answer.number, source=answer.source)

    async def resolve_random(self) -> ResolutionResult:
        """Resolve a question drawn at random from the library.

        Raises:
            EmptyStoreError: if the library is empty.
        """
        answer = await self._resolve_random_answer()
        return ResolutionResult(number=answer.number, source=answer.source)

    async def get_current_answer(self) -> CurrentAnswerView:
        """Return the current answer, seeding one from the library if none exists.

        Raises:
            EmptyStoreError: if seeding is needed and the library is empty.
            OracleUnavailableError: if seeding needed the oracle and it failed.
        """
        answer = await self._current.read()
        if answer is not None:
            return CurrentAnswerView(answer=answer, auto_generated=False)

        async with self._seed_lock:
            answer = await self._current.read()
            if answer is not None:
                return CurrentAnswerView(answer=answer, auto_generated=False)
            answer = await self._resolve_random_answer()
            self._observer.current_answer_seeded(question=answer.question)
            return CurrentAnswerView(answer=answer, auto_generated=True)

    async def aclose(self) -> None:
        """Wait for every in-flight resolution to finish."""
        if self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)

    async def _resolve_random_answer(self) -> CurrentAnswer:
        question = self._store.pick_one_random()
        if question is None:
            raise EmptyStoreError()
        return await self._run_detached(question)

    async def _run_detached(self, question: str) -> CurrentAnswer:
        task = asyncio.get_running_loop().create_task(self._pipeline(question))
        self._in_flight.add(task)
        task.add_done_callback(self._forget)
        return await asyncio.shield(task)

    def _forget(self, task: asyncio.Task[CurrentAnswer]) -> None:
        self._in_flight.discard(task)
        if not task.cancelled():
            # Retrieve the exception so an abandoned failure is not reported
            # as "never retrieved"; _pipeline logs every lookup or oracle failure.
            task.exception()

    async def _pipeline(self, question: str) -> CurrentAnswer:
        self._observer.resolution_started(question=question)
        try:
            number, source = await self._lookup_or_ask(question)
        except Exception as exc:
            self._observer.resolution_failed(question=question, reason=str(exc))
            raise

        answer = CurrentAnswer(
            question=question, number=number, source=source, timestamp=self._clock()
        )
        if not await self._current.write(answer):
            self._observer.resolution_state_not_persisted(question=question)

        recipients = self._broadcaster.publish(NumberUpdate.from_answer(answer))
        self._observer.resolution_completed(
            question=question,
            number=number,
            source=source.value,
            recipients=recipients,
        )
        return answer

    async def _lookup_or_ask(self, question: str) -> tuple[int, AnswerSource]:
        stored = self._store.lookup(question)
        if stored is not None:
            self._observer.resolution_library_hit(question=question, number=stored)
            return stored, AnswerSource.LIBRARY

        self._observer.resolution_library_miss(question=question)
        raw = await self._oracle.generate_number(question)
        number = normalize_number(raw)
        self._observer.resolution_oracle_answered(
            question=question, raw=raw, number=number
        )

        # Cap-reached and duplicate outcomes are logged by the store; the
        # caller still gets the oracle's answer.
        await self._store.append(question, number)
        return number, AnswerSource.ORACLE
