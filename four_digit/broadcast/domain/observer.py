"""Observer port for subscriber lifecycle and delivery events."""

from typing import Protocol


class BroadcastObserver(Protocol):
    def subscriber_added(self, subscriber: str, total: int) -> None: ...

    def subscriber_removed(self, subscriber: str, total: int) -> None: ...

    def message_published(self, number: int, recipients: int) -> None: ...

    def delivery_dropped(self, subscriber: str, reason: str) -> None: ...

    def delivery_failed(self, subscriber: str, reason: str) -> None: ...
