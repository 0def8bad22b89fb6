"""Observer port for the current answer domain."""

from typing import Protocol


class CurrentAnswerObserver(Protocol):
    def current_answer_loaded(self, question: str, number: int) -> None: ...

    def current_answer_absent(self, reason: str) -> None: ...

    def current_answer_written(self, question: str, number: int, source: str) -> None: ...

    def current_answer_persist_failed(self, reason: str) -> None: ...
