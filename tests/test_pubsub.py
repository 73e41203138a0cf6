import asyncio
import threading

from app.core.pubsub import PubSub


def test_publish_without_subscribers_reaches_nobody():
    assert PubSub().publish("employeeUpdated", {"id": "1"}) == 0


def test_subscriber_receives_published_payload():
    async def scenario():
        bus = PubSub()
        stream = bus.subscribe("employeeUpdated")
        waiter = asyncio.ensure_future(stream.__anext__())
        await asyncio.sleep(0)

        assert bus.subscriber_count("employeeUpdated") == 1
        assert bus.publish("employeeUpdated", {"id": "1"}) == 1
        payload = await asyncio.wait_for(waiter, timeout=1)

        await stream.aclose()
        return payload, bus.subscriber_count("employeeUpdated")

    payload, remaining = asyncio.run(scenario())
    assert payload == {"id": "1"}
    assert remaining == 0


def test_topics_are_isolated():
    async def scenario():
        bus = PubSub()
        stream = bus.subscribe("employeeDeleted")
        waiter = asyncio.ensure_future(stream.__anext__())
        await asyncio.sleep(0)

        assert bus.publish("employeeUpdated", {"id": "1"}) == 0
        bus.publish("employeeDeleted", {"id": "2"})
        payload = await asyncio.wait_for(waiter, timeout=1)
        await stream.aclose()
        return payload

    assert asyncio.run(scenario()) == {"id": "2"}


def test_publish_from_worker_thread():
    async def scenario():
        bus = PubSub()
        stream = bus.subscribe("employeeUpdated")
        waiter = asyncio.ensure_future(stream.__anext__())
        await asyncio.sleep(0)

        delivered = await asyncio.to_thread(bus.publish, "employeeUpdated", "from-thread")
        payload = await asyncio.wait_for(waiter, timeout=1)
        await stream.aclose()
        return delivered, payload

    assert asyncio.run(scenario()) == (1, "from-thread")


def test_every_subscriber_gets_a_copy():
    async def scenario():
        bus = PubSub()
        streams = [bus.subscribe("employeeUpdated") for _ in range(3)]
        waiters = [asyncio.ensure_future(stream.__anext__()) for stream in streams]
        await asyncio.sleep(0)

        delivered = bus.publish("employeeUpdated", "event")
        payloads = await asyncio.wait_for(asyncio.gather(*waiters), timeout=1)
        for stream in streams:
            await stream.aclose()
        return delivered, payloads

    delivered, payloads = asyncio.run(scenario())
    assert delivered == 3
    assert payloads == ["event", "event", "event"]


def test_publishing_while_subscribers_come_and_go():
    bus = PubSub()
    stop = threading.Event()
    failures = []

    def publish_forever():
        while not stop.is_set():
            try:
                bus.publish("employeeUpdated", "event")
            except Exception as exc:
                failures.append(exc)

    async def churn():
        for _ in range(200):
            stream = bus.subscribe("employeeUpdated")
            waiter = asyncio.ensure_future(stream.__anext__())
            await asyncio.sleep(0)
            waiter.cancel()
            await asyncio.gather(waiter, return_exceptions=True)
            await stream.aclose()

    publisher = threading.Thread(target=publish_forever)
    publisher.start()
    try:
        asyncio.run(churn())
    finally:
        stop.set()
        publisher.join()

    assert failures == []
    assert bus.subscriber_count("employeeUpdated") == 0
