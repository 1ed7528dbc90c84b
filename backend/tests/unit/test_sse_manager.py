"""Unit tests for the SSE progress broadcaster."""

import asyncio
import json

import pytest

from app.application.services import SSEManager
from app.domain.entities import GenerationProgress, GenerationStep


async def _next(subscription):
    return await subscription.__anext__()


@pytest.mark.asyncio
async def test_progress_is_delivered_to_subscribers():
    manager = SSEManager()
    subscription = manager.subscribe()
    pending = asyncio.ensure_future(_next(subscription))
    await asyncio.sleep(0)
    assert manager.client_count == 1

    await manager.broadcast_progress(
        "run-1", GenerationProgress(GenerationStep.CLASSIFYING, 25, "Classifying...")
    )
    message = await pending

    event, data = message.strip().split("\n")
    assert event == "event: generation_progress"
    payload = json.loads(data.removeprefix("data: "))
    assert payload == {
        "run_id": "run-1",
        "step": "classifying",
        "progress": 25,
        "message": "Classifying...",
        "completed": False,
        "error": None,
    }
    await subscription.aclose()
    assert manager.client_count == 0


@pytest.mark.asyncio
async def test_slow_client_is_disconnected_when_queue_fills():
    manager = SSEManager(max_queue_size=2)
    subscription = manager.subscribe()
    pending = asyncio.ensure_future(_next(subscription))
    await asyncio.sleep(0)

    await manager.broadcast("ping", {"n": 0})
    assert "ping" in await pending

    for n in range(3):
        await manager.broadcast("ping", {"n": n})

    assert manager.client_count == 0
    with pytest.raises(StopAsyncIteration):
        await _next(subscription)


@pytest.mark.asyncio
async def test_shutdown_ends_every_subscription():
    manager = SSEManager()
    subscriptions = [manager.subscribe() for _ in range(2)]
    pending = [asyncio.ensure_future(_next(s)) for s in subscriptions]
    await asyncio.sleep(0)
    assert manager.client_count == 2

    await manager.shutdown()

    for task in pending:
        with pytest.raises(StopAsyncIteration):
            await task
    assert manager.client_count == 0
