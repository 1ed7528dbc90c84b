"""Fan-out of generation progress to Server-Sent Events clients."""

import asyncio
import json
import logging
from collections.abc import AsyncGenerator
from typing import Any

from app.domain.entities import GenerationProgress

logger = logging.getLogger(__name__)

PROGRESS_EVENT = "generation_progress"

_Subscriber = asyncio.Queue  # of str | None; None ends the stream


def format_event(event_type: str, data: dict[str, Any]) -> str:
    return f"event: {event_type}\ndata: {json.dumps(data)}\n\n"


class SSEManager:
    """Broadcasts events to every connected EventSource client.

    Each client owns a bounded queue. A client whose queue is full is
    dropped instead of holding back the others.
    """

    def __init__(self, max_queue_size: int = 100) -> None:
        self._max_queue_size = max_queue_size
        self._subscribers: list[_Subscriber] = []

    @property
    def client_count(self) -> int:
        return len(self._subscribers)

    async def subscribe(self) -> AsyncGenerator[str, None]:
        """Yield formatted events until the manager disconnects this client."""
        queue: _Subscriber = asyncio.Queue(maxsize=self._max_queue_size)
        self._subscribers.append(queue)
        logger.debug("SSE client connected (%d total)", self.client_count)
        try:
            while (event := await queue.get()) is not None:
                yield event
        finally:
            if queue in self._subscribers:
                self._subscribers.remove(queue)

    async def broadcast(self, event_type: str, data: dict[str, Any]) -> None:
        message = format_event(event_type, data)
        for queue in list(self._subscribers):
            try:
                queue.put_nowait(message)
            except asyncio.QueueFull:
                logger.warning("SSE client fell %d events behind, disconnecting", self._max_queue_size)
                self._disconnect(queue)

    async def broadcast_progress(self, run_id: str, progress: GenerationProgress) -> None:
        """Send one progress report of run ``run_id`` as a ``generation_progress`` event."""
        await self.broadcast(PROGRESS_EVENT, {"run_id": run_id, **progress.to_dict()})

    async def shutdown(self) -> None:
        for queue in list(self._subscribers):
            self._disconnect(queue)

    def _disconnect(self, queue: _Subscriber) -> None:
        self._subscribers.remove(queue)
        # Pending events are dropped so the end-of-stream marker fits.
        while not queue.empty():
            queue.get_nowait()
        queue.put_nowait(None)
