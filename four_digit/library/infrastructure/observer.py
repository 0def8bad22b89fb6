"""Structlog implementation of the LibraryObserver port."""

import structlog


class StructlogLibraryObserver:
    """Delegates library domain events to structlog.

    Satisfies the LibraryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def library_loaded(self, total_entries: int, dropped_entries: int) -> None:
        self._log.info(
            "library.loaded",
            total_entries=total_entries,
            dropped_entries=dropped_entries,
        )

    def library_load_absent(self, reason: str) -> None:
        self._log.warning("library.load_absent", reason=reason)

    def library_entry_stored(self, question: str, number: int, size: int) -> None:
        self._log.info(
            "library.entry_stored", question=question, number=number, size=size
        )

    def library_append_skipped(self, question: str, outcome: str) -> None:
        self._log.info("library.append_skipped", question=question, outcome=outcome)

    def library_persist_failed(self, reason: str) -> None:
        self._log.error("library.persist_failed", reason=reason)
