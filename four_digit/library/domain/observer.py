"""Observer port for the library domain."""

from typing import Protocol


class LibraryObserver(Protocol):
    def library_loaded(self, total_entries: int, dropped_entries: int) -> None: ...

    def library_load_absent(self, reason: str) -> None: ...

    def library_entry_stored(self, question: str, number: int, size: int) -> None: ...

    def library_append_skipped(self, question: str, outcome: str) -> None: ...

    def library_persist_failed(self, reason: str) -> None: ...
