import asyncio
import logging
import threading
from collections import defaultdict
from typing import Any, AsyncGenerator, Dict, Set, Tuple

logger = logging.getLogger(__name__)

EMPLOYEE_UPDATED = "employeeUpdated"
EMPLOYEE_DELETED = "employeeDeleted"


class PubSub:
    """
    Process-wide in-memory event fan-out for GraphQL subscriptions.

    Each subscriber owns an unbounded queue bound to the event loop it
    subscribed from, so publishing is safe from sync handlers running in
    the threadpool. There is no backpressure and no ordering guarantee
    across topics.
    """

    def __init__(self):
        self._subscribers: Dict[str, Set[Tuple[asyncio.AbstractEventLoop, asyncio.Queue]]] = defaultdict(set)
        # Guards _subscribers; publishers and subscribers live on different threads
        self._lock = threading.Lock()

    def publish(self, topic: str, payload: Any) -> int:
        """Deliver payload to every current subscriber of topic and return how many were reached"""
        with self._lock:
            subscribers = list(self._subscribers.get(topic, ()))

        delivered = 0
        for loop, queue in subscribers:
            if loop.is_closed():
                continue
            try:
                loop.call_soon_threadsafe(queue.put_nowait, payload)
            except RuntimeError:
                # Loop closed between the check and the call
                continue
            delivered += 1
        logger.debug(f"Published {topic} to {delivered} subscriber(s)")
        return delivered

    async def subscribe(self, topic: str) -> AsyncGenerator[Any, None]:
        subscriber = (asyncio.get_running_loop(), asyncio.Queue())
        with self._lock:
            self._subscribers[topic].add(subscriber)
        try:
            while True:
                yield await subscriber[1].get()
        finally:
            with self._lock:
                self._subscribers[topic].discard(subscriber)
                if not self._subscribers[topic]:
                    del self._subscribers[topic]

    def subscriber_count(self, topic: str) -> int:
        with self._lock:
            return len(self._subscribers.get(topic, ()))


pubsub = PubSub()
