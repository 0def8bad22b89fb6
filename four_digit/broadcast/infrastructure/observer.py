"""Structlog implementation of the BroadcastObserver port."""

import structlog


class StructlogBroadcastObserver:
    """Delegates broadcast events to structlog.

    Satisfies the BroadcastObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def subscriber_added(self, subscriber: str, total: int) -> None:
        self._log.info("broadcast.subscriber_added", subscriber=subscriber, total=total)

    def subscriber_removed(self, subscriber: str, total: int) -> None:
        self._log.info(
            "broadcast.subscriber_removed", subscriber=subscriber, total=total
        )

    def message_published(self, number: int, recipients: int) -> None:
        self._log.debug("broadcast.published", number=number, recipients=recipients)

    def delivery_dropped(self, subscriber: str, reason: str) -> None:
        self._log.warning(
            "broadcast.delivery_dropped", subscriber=subscriber, reason=reason
        )

    def delivery_failed(self, subscriber: str, reason: str) -> None:
        self._log.warning(
            "broadcast.delivery_failed", subscriber=subscriber, reason=reason
        )
