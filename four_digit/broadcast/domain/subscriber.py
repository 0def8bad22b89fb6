"""Subscriber Protocol: anything that can receive a NumberUpdate."""

from typing import Protocol

from four_digit.broadcast.domain.message import NumberUpdate


class Subscriber(Protocol):
    """A live display client.

    ``send`` raising any exception marks the subscriber as broken.
    """

    @property
    def name(self) -> str: ...

    async def send(self, message: NumberUpdate) -> None: ...
