"""ResolutionObserver port."""

from typing import Protocol


class ResolutionObserver(Protocol):
    """Observer port for the question→number pipeline."""

    def resolution_started(self, question: str) -> None: ...

    def resolution_library_hit(self, question: str, number: int) -> None: ...

    def resolution_library_miss(self, question: str) -> None: ...

    def resolution_oracle_answered(self, question: str, raw: float, number: int) -> None: ...

    def resolution_completed(
        self, question: str, number: int, source: str, recipients: int
    ) -> None: ...

    def resolution_failed(self, question: str, reason: str) -> None: ...

    def resolution_state_not_persisted(self, question: str) -> None: ...

    def current_answer_seeded(self, question: str) -> None: ...
