"""Structlog implementation of the OracleObserver port."""

import structlog


class StructlogOracleObserver:
    """Delegates oracle events to structlog.

    Satisfies the OracleObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def oracle_call_started(self, operation: str, model: str) -> None:
        self._log.info("oracle.call_started", operation=operation, model=model)

    def oracle_call_completed(self, operation: str, duration_ms: int) -> None:
        self._log.info(
            "oracle.call_completed", operation=operation, duration_ms=duration_ms
        )

    def oracle_call_failed(self, operation: str, reason: str) -> None:
        self._log.error("oracle.call_failed", operation=operation, reason=reason)
