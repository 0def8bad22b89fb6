"""Structlog implementation of the GenerationObserver port."""

import structlog


class StructlogGenerationObserver:
    """Delegates batch generation events to structlog.

    Satisfies the GenerationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def batch_started(self, requested: int) -> None:
        self._log.info("generation.batch_started", requested=requested)

    def batch_question_dropped(self, raw_question: str) -> None:
        self._log.debug("generation.question_dropped", raw_question=raw_question)

    def batch_completed(self, requested: int, received: int, stored: int) -> None:
        self._log.info(
            "generation.batch_completed",
            requested=requested,
            received=received,
            stored=stored,
        )

    def batch_failed(self, requested: int, reason: str) -> None:
        self._log.error("generation.batch_failed", requested=requested, reason=reason)
