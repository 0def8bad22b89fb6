"""Structlog implementation of the CurrentAnswerObserver port."""

import structlog


class StructlogCurrentAnswerObserver:
    """Delegates current answer events to structlog.

    Satisfies the CurrentAnswerObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def current_answer_loaded(self, question: str, number: int) -> None:
        self._log.info("current.loaded", question=question, number=number)

    def current_answer_absent(self, reason: str) -> None:
        self._log.info("current.absent", reason=reason)

    def current_answer_written(self, question: str, number: int, source: str) -> None:
        self._log.debug(
            "current.written", question=question, number=number, source=source
        )

    def current_answer_persist_failed(self, reason: str) -> None:
        self._log.error("current.persist_failed", reason=reason)
