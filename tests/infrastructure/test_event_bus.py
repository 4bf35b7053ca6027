"""Tests for EventBus infrastructure."""

import pytest
from snowbridge.infrastructure.event_bus import EventBus
from snowbridge.domain.events.event_base import DomainEvent
from snowbridge.domain.events.adapter_events import AdapterOnlineEvent, AdapterOfflineEvent


class TestEventBus:
    @pytest.mark.asyncio
    async def test_publish_to_subscriber(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(event)

        bus.subscribe(AdapterOnlineEvent, handler)

        await bus.publish([AdapterOnlineEvent(aggregate_id="snow-1")])

        assert len(received) == 1
        assert received[0].aggregate_id == "snow-1"

    @pytest.mark.asyncio
    async def test_subscribe_by_name(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(event.payload)

        bus.subscribe("OFFLINE", handler)

        await bus.publish([
            AdapterOnlineEvent(aggregate_id="snow-1"),
            AdapterOfflineEvent(aggregate_id="snow-1"),
        ])

        assert received == [{"id": "snow-1"}]

    @pytest.mark.asyncio
    async def test_no_subscriber(self):
        bus = EventBus()
        # Should not raise
        await bus.publish([AdapterOnlineEvent(aggregate_id="snow-1")])

    @pytest.mark.asyncio
    async def test_multiple_subscribers_in_order(self):
        bus = EventBus()
        order = []

        async def handler_a(event):
            order.append("a")

        async def handler_b(event):
            order.append("b")

        bus.subscribe(AdapterOnlineEvent, handler_a)
        bus.subscribe("ONLINE", handler_b)

        await bus.publish([AdapterOnlineEvent(aggregate_id="snow-1")])

        assert order == ["a", "b"]

    @pytest.mark.asyncio
    async def test_type_filtering(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(event)

        bus.subscribe(AdapterOnlineEvent, handler)

        # Publish a base DomainEvent — handler should NOT fire
        await bus.publish([DomainEvent(aggregate_id="snow-1")])

        assert len(received) == 0

    @pytest.mark.asyncio
    async def test_failing_subscriber_does_not_stop_others(self, caplog):
        bus = EventBus()
        received = []

        async def broken(event):
            raise RuntimeError("observer broke")

        async def handler(event):
            received.append(event.event_name)

        bus.subscribe("ONLINE", broken)
        bus.subscribe("ONLINE", handler)

        await bus.publish([AdapterOnlineEvent(aggregate_id="snow-1")])

        assert received == ["ONLINE"]
        assert "observer broke" in caplog.text
