"""The single, persisted most-recent resolution."""

import asyncio

from four_digit.current.domain.answer import CurrentAnswer
from four_digit.current.domain.observer import CurrentAnswerObserver
from four_digit.current.domain.repository import CurrentAnswerRepository
from four_digit.storage.domain.absent import Absent
from four_digit.storage.infrastructure.errors import StorageWriteError


class CurrentAnswerStore:
    """Holds the latest CurrentAnswer and mirrors every overwrite to disk.

    The repository is read once, on the first ``read`` or ``write``. No
    history is kept.
    """

    def __init__(
        self, repository: CurrentAnswerRepository, observer: CurrentAnswerObserver
    ) -> None:
        self._repository = repository
        self._observer = observer
        self._answer: CurrentAnswer | None = None
        self._loaded = False
        self._lock = asyncio.Lock()

    async def read(self) -> CurrentAnswer | None:
        async with self._lock:
            await self._ensure_loaded()
            return self._answer

    async def write(self, answer: CurrentAnswer) -> bool:
        """Overwrite the current answer. Returns False if it could not be persisted."""
        async with self._lock:
            # Mark loaded so a later read never resurrects an older file copy.
            self._loaded = True
            self._answer = answer
            self._observer.current_answer_written(
                question=answer.question,
                number=answer.number,
                source=answer.source.value,
            )
            try:
                await asyncio.to_thread(self._repository.save, answer)
            except StorageWriteError as exc:
                self._observer.current_answer_persist_failed(reason=str(exc))
                return False
            return True

    async def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        loaded = await asyncio.to_thread(self._repository.load)
        self._loaded = True
        if isinstance(loaded, Absent):
            self._observer.current_answer_absent(reason=loaded.reason)
            return
        self._answer = loaded
        self._observer.current_answer_loaded(
            question=loaded.question, number=loaded.number
        )
