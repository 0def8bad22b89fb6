"""Fans NumberUpdate messages out to an open set of subscribers."""

import asyncio
import itertools
from dataclasses import dataclass, field

from four_digit.broadcast.domain.message import NumberUpdate
from four_digit.broadcast.domain.observer import BroadcastObserver
from four_digit.broadcast.domain.subscriber import Subscriber

DEFAULT_QUEUE_SIZE = 32


@dataclass(frozen=True)
class SubscriptionHandle:
    id: int
    name: str


@dataclass
class _Subscription:
    handle: SubscriptionHandle
    subscriber: Subscriber
    queue: asyncio.Queue[NumberUpdate]
    task: asyncio.Task[None] | None = field(default=None)


class Broadcaster:
    """Subscriber registry with one bounded FIFO queue and delivery task each.

    ``publish`` never awaits: it enqueues with ``put_nowait`` and returns. A
    subscriber whose queue is full misses that message; a subscriber whose
    ``send`` raises is dropped from the registry. Neither affects anyone else.
    """

    def __init__(
        self, observer: BroadcastObserver, queue_size: int = DEFAULT_QUEUE_SIZE
    ) -> None:
        self._observer = observer
        self._queue_size = queue_size
        self._subscriptions: dict[int, _Subscription] = {}
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, subscriber: Subscriber) -> SubscriptionHandle:
        """Register ``subscriber``. Must be called from a running event loop."""
        handle = SubscriptionHandle(id=next(self._ids), name=subscriber.name)
        subscription = _Subscription(
            handle=handle,
            subscriber=subscriber,
            queue=asyncio.Queue(maxsize=self._queue_size),
        )
        subscription.task = asyncio.get_running_loop().create_task(
            self._deliver(subscription), name=f"broadcast-{handle.id}"
        )
        self._subscriptions[handle.id] = subscription
        self._observer.subscriber_added(
            subscriber=handle.name, total=len(self._subscriptions)
        )
        return handle

    def unsubscribe(self, handle: SubscriptionHandle) -> None:
        """Remove a subscriber. Unknown or already-removed handles are ignored."""
        subscription = self._detach(handle)
        if subscription is not None and subscription.task is not None:
            subscription.task.cancel()

    def publish(self, message: NumberUpdate) -> int:
        """Queue ``message`` for every current subscriber; return how many accepted it."""
        recipients = 0
        for subscription in list(self._subscriptions.values()):
            try:
                subscription.queue.put_nowait(message)
            except asyncio.QueueFull:
                self._observer.delivery_dropped(
                    subscriber=subscription.handle.name, reason="queue full"
                )
                continue
            recipients += 1
        self._observer.message_published(number=message.number, recipients=recipients)
        return recipients

    async def flush(self) -> None:
        """Wait until every message queued so far has been handled."""
        await asyncio.gather(
            *(sub.queue.join() for sub in list(self._subscriptions.values()))
        )

    async def aclose(self) -> None:
        """Unsubscribe everyone and wait for their delivery tasks to stop."""
        tasks = [
            sub.task for sub in self._subscriptions.values() if sub.task is not None
        ]
        for handle in [sub.handle for sub in self._subscriptions.values()]:
            self.unsubscribe(handle)
        await asyncio.gather(*tasks, return_exceptions=True)

    def _detach(self, handle: SubscriptionHandle) -> _Subscription | None:
        subscription = self._subscriptions.pop(handle.id, None)
        if subscription is not None:
            self._observer.subscriber_removed(
                subscriber=handle.name, total=len(self._subscriptions)
            )
        return subscription

    async def _deliver(self, subscription: _Subscription) -> None:
        queue = subscription.queue
        try:
            while True:
                message = await queue.get()
                try:
                    await subscription.subscriber.send(message)
                except asyncio.CancelledError:
                    raise
                except Exception as exc:
                    self._observer.delivery_failed(
                        subscriber=subscription.handle.name,
                        reason=str(exc) or type(exc).__name__,
                    )
                    self._detach(subscription.handle)
                    return
                finally:
                    queue.task_done()
        finally:
            # Release anyone waiting in flush() on messages that will never go out.
            while not queue.empty():
                queue.get_nowait()
                queue.task_done()
