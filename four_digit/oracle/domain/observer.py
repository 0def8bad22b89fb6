"""Observer port for oracle calls."""

from typing import Protocol


class OracleObserver(Protocol):
    """Observer port for oracle events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def oracle_call_started(self, operation: str, model: str) -> None: ...

    def oracle_call_completed(self, operation: str, duration_ms: int) -> None: ...

    def oracle_call_failed(self, operation: str, reason: str) -> None: ...
