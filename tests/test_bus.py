"""Unit tests for EventBus."""

import asyncio
import pytest
from communication.bus import EventBus


class TestEventBus:
    """Tests for EventBus class."""

    @pytest.mark.asyncio
    async def test_subscribe(self):
        """Subscriber is added to bus; re-subscribing returns the same one."""
        bus = EventBus(queue_size=10)
        sub = await bus.subscribe("canvas")
        assert sub.name == "canvas"
        assert await bus.subscribe("canvas") is sub
        assert bus.get_stats()["subscriber_count"] == 1

    @pytest.mark.asyncio
    async def test_subscribe_custom_queue_size(self):
        bus = EventBus(queue_size=10)
        sub = await bus.subscribe("canvas", max_queue_size=50)
        assert sub.queue.maxsize == 50

    @pytest.mark.asyncio
    async def test_unsubscribe(self):
        bus = EventBus(queue_size=10)
        await bus.subscribe("canvas")
        assert await bus.unsubscribe("canvas") is True
        assert await bus.unsubscribe("canvas") is False
        assert bus.get_stats()["subscriber_count"] == 0

    @pytest.mark.asyncio
    async def test_publish_to_all_subscribers(self):
        bus = EventBus(queue_size=10)
        sub1 = await bus.subscribe("canvas-1")
        sub2 = await bus.subscribe("canvas-2")

        count = await bus.publish({"kind": "palette"}, topic="palette")

        assert count == 2
        assert (await asyncio.wait_for(sub1.queue.get(), timeout=1.0))["kind"] == "palette"
        assert (await asyncio.wait_for(sub2.queue.get(), timeout=1.0))["kind"] == "palette"

    @pytest.mark.asyncio
    async def test_topic_filter(self):
        """Subscribers with topics only receive those topics."""
        bus = EventBus(queue_size=10)
        frames = await bus.subscribe("frames", topics=["frame"])
        everything = await bus.subscribe("all")

        await bus.publish({"kind": "paused"}, topic="control")
        await bus.publish({"kind": "frame"}, topic="frame")

        assert frames.queue.qsize() == 1
        assert everything.queue.qsize() == 2

    @pytest.mark.asyncio
    async def test_queue_overflow_drops_message(self):
        """A full queue drops new items instead of blocking the frame loop."""
        bus = EventBus(queue_size=2)
        sub = await bus.subscribe("slow-canvas")
        for i in range(3):
            await bus.publish({"n": i})

        assert sub.dropped == 1
        assert bus.get_stats()["total_dropped"] == 1
        assert (await sub.queue.get())["n"] == 0

    @pytest.mark.asyncio
    async def test_get_subscriber_info(self):
        bus = EventBus(queue_size=10)
        sub = await bus.subscribe("canvas", topics=["frame"])
        await bus.publish({"kind": "frame"}, topic="frame")
        await sub.queue.get()

        info = await bus.get_subscriber_info()
        assert info == [{"name": "canvas", "topics": ["frame"], "queued": 0, "received": 1, "dropped": 0}]
