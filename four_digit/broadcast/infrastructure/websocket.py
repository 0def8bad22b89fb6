"""Adapts a FastAPI WebSocket to the Subscriber port."""

import asyncio
from typing import Any

from fastapi import WebSocket

from four_digit.broadcast.domain.message import NumberUpdate


class WebSocketSubscriber:
    """Sends NumberUpdate messages as JSON text frames.

    All writes go through one lock so the delivery task and the connection
    handler never interleave frames. Updates wait until ``greet`` has sent
    the ``connected`` frame, so a client always sees that frame first even
    when it is subscribed before the greeting goes out.
    """

    def __init__(self, websocket: WebSocket) -> None:
        self._websocket = websocket
        self._send_lock = asyncio.Lock()
        self._greeted = asyncio.Event()
        client = websocket.client
        self._name = f"{client.host}:{client.port}" if client else "websocket"

    @property
    def name(self) -> str:
        return self._name

    async def send(self, message: NumberUpdate) -> None:
        await self._greeted.wait()
        await self._send_json(message.model_dump(mode="json"))

    async def greet(self) -> None:
        await self._send_json({"type": "connected"})
        self._greeted.set()

    async def _send_json(self, payload: dict[str, Any]) -> None:
        async with self._send_lock:
            await self._websocket.send_json(payload)
