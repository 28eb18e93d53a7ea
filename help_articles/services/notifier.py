from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class ChangeNotifier:
    """Fan-out of "table changed" signals to any number of subscribers.

    Each subscriber owns a one-slot queue. Signals arriving while a
    subscriber is still busy with the previous one collapse into a single
    pending signal, so slow consumers only ever re-read the latest state.
    """

    def __init__(self) -> None:
        self._subscribers: set[asyncio.Queue[None]] = set()

    @asynccontextmanager
    async def subscribe(self) -> AsyncIterator[AsyncIterator[None]]:
        queue: asyncio.Queue[None] = asyncio.Queue(maxsize=1)
        self._subscribers.add(queue)
        try:
            yield self._drain(queue)
        finally:
            self._subscribers.discard(queue)

    def notify(self) -> None:
        for queue in list(self._subscribers):
            try:
                queue.put_nowait(None)
            except asyncio.QueueFull:
                pass

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    @staticmethod
    async def _drain(queue: asyncio.Queue[None]) -> AsyncIterator[None]:
        while True:
            await queue.get()
            yield None
