"""Tests for event listing and detail endpoints."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from eventrsvp.events.tests.inmemory_models import (
    InMemoryStore,
    auth_headers,
    create_test_event,
    create_test_overrides,
)
from eventrsvp.events.urls import EVENT_URL, EVENTS_URL, PUBLIC_EVENTS_URL

NOW = datetime(2026, 10, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def store():
    store = InMemoryStore()
    store.add_event(create_test_event(user_id="owner-1", title="Older", created_at=NOW - timedelta(days=1)))
    store.add_event(create_test_event(user_id="owner-1", title="Newer", created_at=NOW))
    store.add_event(create_test_event(user_id="owner-2", title="Someone Else", created_at=NOW))
    return store


async def test_owner_lists_only_own_events_newest_first(client_factory, store):
    async with client_factory(create_test_overrides(store)) as client:
        response = await client.get(EVENTS_URL, headers=auth_headers("owner-1"))

    assert response.status_code == 200
    assert [e["title"] for e in response.json()] == ["Newer", "Older"]


async def test_owner_cannot_list_other_owner(client_factory, store):
    async with client_factory(create_test_overrides(store)) as client:
        response = await client.get(
            EVENTS_URL, params={"user_id": "owner-2"}, headers=auth_headers("owner-1")
        )

    assert response.status_code == 403


@pytest.mark.parametrize("role", ["Admin", "Staff"])
async def test_privileged_users_list_all_events(client_factory, store, role):
    async with client_factory(create_test_overrides(store)) as client:
        response = await client.get(EVENTS_URL, headers=auth_headers("admin-1", role))

    assert response.status_code == 200
    assert len(response.json()) == 3


async def test_admin_can_filter_by_owner(client_factory, store):
    async with client_factory(create_test_overrides(store)) as client:
        response = await client.get(
            EVENTS_URL, params={"user_id": "owner-2"}, headers=auth_headers("admin-1", "Admin")
        )

    assert [e["title"] for e in response.json()] == ["Someone Else"]


async def test_list_events_requires_authentication(client_factory, store):
    async with client_factory(create_test_overrides(store)) as client:
        response = await client.get(EVENTS_URL)

    assert response.status_code == 401


async def test_public_events_sorted_by_date(client_factory):
    store = InMemoryStore()
    store.add_event(create_test_event(title="Later", date="2026-12-01"))
    store.add_event(create_test_event(title="Hidden", date="2026-01-01", is_public=False))
    store.add_event(create_test_event(title="Sooner", date="2026-08-01"))

    async with client_factory(create_test_overrides(store)) as client:
        response = await client.get(PUBLIC_EVENTS_URL)

    assert response.status_code == 200
    assert [e["title"] for e in response.json()] == ["Sooner", "Later"]


async def test_public_event_visible_anonymously(client_factory):
    store = InMemoryStore()
    event = store.add_event(create_test_event(is_public=True))

    async with client_factory(create_test_overrides(store)) as client:
        response = await client.get(EVENT_URL.format(event_id=event.uuid))

    assert response.status_code == 200
    assert response.json()["uuid"] == str(event.uuid)


async def test_private_event_access(client_factory):
    store = InMemoryStore()
    event = store.add_event(create_test_event(user_id="owner-1", is_public=False))
    url = EVENT_URL.format(event_id=event.uuid)

    async with client_factory(create_test_overrides(store)) as client:
        anonymous = await client.get(url)
        stranger = await client.get(url, headers=auth_headers("owner-2"))
        owner = await client.get(url, headers=auth_headers("owner-1"))
        staff = await client.get(url, headers=auth_headers("staff-1", "Staff"))

    assert anonymous.status_code == 401
    assert stranger.status_code == 403
    assert owner.status_code == 200
    assert staff.status_code == 200


async def test_get_event_not_found(client_factory):
    async with client_factory(create_test_overrides(InMemoryStore())) as client:
        response = await client.get(EVENT_URL.format(event_id=uuid4()))

    assert response.status_code == 404
    assert response.json()["detail"] == "Event not found"


async def test_get_event_invalid_id(client_factory):
    async with client_factory(create_test_overrides(InMemoryStore())) as client:
        response = await client.get(EVENT_URL.format(event_id="not-a-uuid"))

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid event ID"
