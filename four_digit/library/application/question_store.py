"""The capped, persisted library of question/number pairs."""

import asyncio
import random

from four_digit.library.domain.entry import AppendOutcome, QAEntry, question_key
from four_digit.library.domain.observer import LibraryObserver
from four_digit.library.domain.repository import LibraryRepository
from four_digit.library.infrastructure.errors import EmptyStoreError
from four_digit.storage.domain.absent import Absent
from four_digit.storage.infrastructure.errors import StorageWriteError

DEFAULT_CAPACITY = 1000


class QuestionStore:
    """Ordered, append-only library capped at ``capacity`` entries.

    Mutations (``load`` and ``append``) run under a single asyncio.Lock and
    persist the full contents before releasing it. Reads are synchronous and
    therefore see a consistent snapshot on the event loop.
    """

    def __init__(
        self,
        repository: LibraryRepository,
        observer: LibraryObserver,
        capacity: int = DEFAULT_CAPACITY,
        rng: random.Random | None = None,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._repository = repository
        self._observer = observer
        self._capacity = capacity
        self._rng = rng if rng is not None else random.Random()
        self._entries: list[QAEntry] = []
        self._index: dict[str, int] = {}
        self._lock = asyncio.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def entries(self) -> list[QAEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    async def load(self) -> None:
        """Replace the in-memory contents with what the repository holds.

        A missing or corrupt backing file leaves the store empty. Entries past
        the capacity and repeated questions are dropped.
        """
        async with self._lock:
            loaded = await asyncio.to_thread(self._repository.load)
            if isinstance(loaded, Absent):
                self._entries = []
                self._index = {}
                self._observer.library_load_absent(reason=loaded.reason)
                return

            entries: list[QAEntry] = []
            index: dict[str, int] = {}
            for entry in loaded:
                if len(entries) >= self._capacity:
                    break
                if entry.key in index:
                    continue
                index[entry.key] = entry.number
                entries.append(entry)

            self._entries = entries
            self._index = index
            self._observer.library_loaded(
                total_entries=len(entries),
                dropped_entries=len(loaded) - len(entries),
            )

    def lookup(self, question: str) -> int | None:
        """Return the stored number for ``question`` (trimmed, case-folded), or None."""
        return self._index.get(question_key(question))

    async def append(self, question: str, number: int) -> AppendOutcome:
        """
        Append a new entry and persist the library.

        The question is trimmed first. Nothing is mutated unless the outcome
        is ``STORED``. A failed write is reported to the observer; the entry
        stays in memory and the outcome is still ``STORED``.
        """
        trimmed = question.strip()
        async with self._lock:
            if not trimmed:
                outcome = AppendOutcome.REJECTED
            elif len(self._entries) >= self._capacity:
                outcome = AppendOutcome.CAP_REACHED
            elif question_key(trimmed) in self._index:
                outcome = AppendOutcome.DUPLICATE
            else:
                outcome = AppendOutcome.STORED

            if outcome is not AppendOutcome.STORED:
                self._observer.library_append_skipped(
                    question=trimmed, outcome=outcome.value
                )
                return outcome

            entry = QAEntry(question=trimmed, number=number)
            self._entries.append(entry)
            self._index[entry.key] = entry.number
            self._observer.library_entry_stored(
                question=entry.question, number=entry.number, size=len(self._entries)
            )

            snapshot = list(self._entries)
            try:
                await asyncio.to_thread(self._repository.save, snapshot)
            except StorageWriteError as exc:
                self._observer.library_persist_failed(reason=str(exc))

            return outcome

    def sample_random(self, count: int) -> list[str]:
        """
        Return up to ``count`` distinct questions in random order.

        Raises:
            EmptyStoreError: if the library holds no entries.
        """
        snapshot = self._entries
        if not snapshot:
            raise EmptyStoreError()
        chosen = self._rng.sample(snapshot, k=max(0, min(count, len(snapshot))))
        return [entry.question for entry in chosen]

    def pick_one_random(self) -> str | None:
        snapshot = self._entries
        if not snapshot:
            return None
        return self._rng.choice(snapshot).question
