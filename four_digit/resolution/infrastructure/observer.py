"""Structlog implementation of the ResolutionObserver port."""

import structlog


class StructlogResolutionObserver:
    """Delegates resolution events to structlog.

    Satisfies the ResolutionObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def resolution_started(self, question: str) -> None:
        self._log.info("resolution.started", question=question)

    def resolution_library_hit(self, question: str, number: int) -> None:
        self._log.info("resolution.library_hit", question=question, number=number)

    def resolution_library_miss(self, question: str) -> None:
        self._log.info("resolution.library_miss", question=question)

    def resolution_oracle_answered(self, question: str, raw: float, number: int) -> None:
        self._log.info(
            "resolution.oracle_answered", question=question, raw=raw, number=number
        )

    def resolution_completed(
        self, question: str, number: int, source: str, recipients: int
    ) -> None:
        self._log.info(
            "resolution.completed",
            question=question,
            number=number,
            source=source,
            recipients=recipients,
        )

    def resolution_failed(self, question: str, reason: str) -> None:
        self._log.error("resolution.failed", question=question, reason=reason)

    def resolution_state_not_persisted(self, question: str) -> None:
        self._log.warning("resolution.state_not_persisted", question=question)

    def current_answer_seeded(self, question: str) -> None:
        self._log.info("resolution.current_answer_seeded", question=question)
