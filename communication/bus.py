import asyncio
import time
from internal.logging import get_logger

class Subscriber:
    __slots__ = ("name", "queue", "topics", "created_at", "received", "dropped")

    def __init__(self, name, queue, topics=None):
        self.name = name
        self.queue = queue
        self.topics = topics or set()
        self.created_at = time.time()
        self.received = 0
        self.dropped = 0

    def wants(self, topic):
        return not self.topics or topic in self.topics

class EventBus:
    """Copy-on-write pub/sub for frames, palette changes and control events.

    Publishing never blocks: a full subscriber queue drops the item and counts it.
    """

    def __init__(self, queue_size=50):
        self._lock = asyncio.Lock()
        self._subscribers = {}
        self._subscribers_snapshot = ()
        self._queue_size = queue_size
        self._log = get_logger()
        self.total_published = 0
        self.total_delivered = 0
        self.total_dropped = 0

    async def subscribe(self, name, max_queue_size=None, topics=None):
        async with self._lock:
            if name in self._subscribers:
                return self._subscribers[name]
            queue = asyncio.Queue(maxsize=max_queue_size or self._queue_size)
            subscriber = Subscriber(name, queue, set(topics) if topics else set())
            self._subscribers[name] = subscriber
            self._subscribers_snapshot = tuple(self._subscribers.values())
            self._log.info(f"sub+ {name}", topics=sorted(subscriber.topics))
            return subscriber

    async def unsubscribe(self, name):
        async with self._lock:
            if self._subscribers.pop(name, None) is None:
                return False
            self._subscribers_snapshot = tuple(self._subscribers.values())
            self._log.info(f"sub- {name}")
            return True

    async def publish(self, item, topic=""):
        delivered = dropped = 0
        for subscriber in self._subscribers_snapshot:
            if not subscriber.wants(topic):
                continue
            try:
                subscriber.queue.put_nowait(item)
            except asyncio.QueueFull:
                subscriber.dropped += 1
                dropped += 1
                continue
            subscriber.received += 1
            delivered += 1
        self.total_published += 1
        self.total_delivered += delivered
        self.total_dropped += dropped
        return delivered

    def get_stats(self):
        return {
            "subscriber_count": len(self._subscribers_snapshot),
            "total_published": self.total_published,
            "total_delivered": self.total_delivered,
            "total_dropped": self.total_dropped
        }

    async def get_subscriber_info(self):
        return [
            {   "name": subscriber.name,
                "topics": sorted(subscriber.topics),
                "queued": subscriber.queue.qsize(),
                "received": subscriber.received,
                "dropped": subscriber.dropped
            } for subscriber in self._subscribers_snapshot
        ]
