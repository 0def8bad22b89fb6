"""LibraryRepository Protocol: durable home of the question library."""

from typing import Protocol

from four_digit.library.domain.entry import QAEntry
from four_digit.storage.domain.absent import Absent


class LibraryRepository(Protocol):
    """Loads and saves the full ordered list of library entries."""

    def load(self) -> list[QAEntry] | Absent: ...

    def save(self, entries: list[QAEntry]) -> None:
        """Persist all entries, replacing what was stored.

        Raises:
            StorageWriteError: if the entries cannot be written.
        """
        ...
