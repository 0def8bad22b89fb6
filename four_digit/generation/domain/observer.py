"""Observer port for batch generation."""

from typing import Protocol


class GenerationObserver(Protocol):
    def batch_started(self, requested: int) -> None: ...

    def batch_question_dropped(self, raw_question: str) -> None: ...

    def batch_completed(self, requested: int, received: int, stored: int) -> None: ...

    def batch_failed(self, requested: int, reason: str) -> None: ...
