"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, model: str) -> None:
        self._log.info("config.loaded", name=name, model=model)

    def config_batch_secret_missing(self) -> None:
        self._log.warning(
            "config.batch_secret_missing",
            message="server.batch_secret is unset; batch generation over HTTP is disabled",
        )
