"""Tests for delete event endpoint."""

from uuid import uuid4

from eventrsvp.events.tests.inmemory_models import (
    InMemoryStore,
    auth_headers,
    create_test_event,
    create_test_overrides,
    create_test_rsvp,
)
from eventrsvp.events.urls import EVENT_URL


async def test_delete_event_removes_rsvps(client_factory):
    store = InMemoryStore()
    event = store.add_event(create_test_event(user_id="owner-1"))
    other = store.add_event(create_test_event(user_id="owner-1"))
    store.add_rsvp(create_test_rsvp(event.uuid, email="a@example.com"))
    kept = store.add_rsvp(create_test_rsvp(other.uuid, email="b@example.com"))

    async with client_factory(create_test_overrides(store)) as client:
        response = await client.delete(EVENT_URL.format(event_id=event.uuid), headers=auth_headers())

    assert response.status_code == 200
    assert response.json()["message"] == "Event deleted successfully"
    assert list(store.events) == [other.uuid]
    assert list(store.rsvps) == [kept.uuid]


async def test_delete_event_forbidden_for_other_owner(client_factory):
    store = InMemoryStore()
    event = store.add_event(create_test_event(user_id="owner-1"))

    async with client_factory(create_test_overrides(store)) as client:
        response = await client.delete(
            EVENT_URL.format(event_id=event.uuid), headers=auth_headers("owner-2")
        )

    assert response.status_code == 403
    assert event.uuid in store.events


async def test_delete_event_not_found(client_factory):
    async with client_factory(create_test_overrides(InMemoryStore())) as client:
        response = await client.delete(EVENT_URL.format(event_id=uuid4()), headers=auth_headers())

    assert response.status_code == 404
