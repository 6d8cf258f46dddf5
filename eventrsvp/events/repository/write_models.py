import abc
from functools import partial
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eventrsvp.config.database import async_session_manager
from eventrsvp.events.dtos import (
    CustomFieldDefinition,
    DuplicateRsvpError,
    EventDTO,
    EventNotFoundError,
    NormalizedRsvp,
    RsvpDTO,
    RsvpNotFoundError,
)
from eventrsvp.events.repository.orm_models import Event, Rsvp
from eventrsvp.events.repository.read_models import event_to_dto, rsvp_to_dto

# Columns an owner may change after creation
UPDATABLE_EVENT_FIELDS = frozenset(
    {"title", "description", "date", "time", "location", "is_public", "custom_fields"}
)


class EventWriteModel(abc.ABC):
    @abc.abstractmethod
    async def create_event(
        self,
        user_id: str,
        title: str,
        description: str,
        date: str,
        time: str,
        location: str,
        is_public: bool = True,
        custom_fields: list[CustomFieldDefinition] | None = None,
    ) -> EventDTO:
        raise NotImplementedError

    @abc.abstractmethod
    async def update_event(self, event_id: UUID, changes: dict[str, Any]) -> EventDTO:
        """
        Apply a partial update. Keys outside UPDATABLE_EVENT_FIELDS are ignored.
        Raises EventNotFoundError when the event does not exist.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def delete_event(self, event_id: UUID) -> None:
        """Delete an event together with all of its RSVPs."""
        raise NotImplementedError


class RsvpWriteModel(abc.ABC):
    @abc.abstractmethod
    async def create_rsvp(self, event_id: UUID, rsvp: NormalizedRsvp) -> RsvpDTO:
        """
        Store a validated RSVP.
        Raises DuplicateRsvpError when the email already RSVP'd to the event.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def delete_rsvp(self, rsvp_id: UUID) -> None:
        raise NotImplementedError


class SqlEventWriteModel(EventWriteModel):
    """SQL implementation of event write operations."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_event(
        self,
        user_id: str,
        title: str,
        description: str,
        date: str,
        time: str,
        location: str,
        is_public: bool = True,
        custom_fields: list[CustomFieldDefinition] | None = None,
    ) -> EventDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = Event(
                user_id=user_id,
                title=title,
                description=description,
                date=date,
                time=time,
                location=location,
                is_public=is_public,
                custom_fields=[definition.to_dict() for definition in custom_fields or []],
            )
            session.add(event)
            await session.flush()
            return event_to_dto(event)

    async def update_event(self, event_id: UUID, changes: dict[str, Any]) -> EventDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(Event).where(Event.uuid == event_id))
            event = result.scalar_one_or_none()
            if not event:
                raise EventNotFoundError(event_id)

            for key, value in changes.items():
                if key not in UPDATABLE_EVENT_FIELDS:
                    continue
                if key == "custom_fields":
                    value = [definition.to_dict() for definition in value]
                setattr(event, key, value)

            await session.flush()
            await session.refresh(event)
            return event_to_dto(event)

    async def delete_event(self, event_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(Event).where(Event.uuid == event_id))
            event = result.scalar_one_or_none()
            if not event:
                raise EventNotFoundError(event_id)

            await session.execute(delete(Rsvp).where(Rsvp.event_id == event_id))
            await session.delete(event)
            await session.flush()


class SqlRsvpWriteModel(RsvpWriteModel):
    """SQL implementation of RSVP write operations."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_rsvp(self, event_id: UUID, rsvp: NormalizedRsvp) -> RsvpDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            existing = await session.execute(
                select(Rsvp.uuid).where(Rsvp.event_id == event_id, Rsvp.email == rsvp.email)
            )
            if existing.scalar_one_or_none() is not None:
                raise DuplicateRsvpError(event_id, rsvp.email)

            record = Rsvp(
                event_id=event_id,
                name=rsvp.name,
                email=rsvp.email,
                responses=dict(rsvp.responses),
            )
            session.add(record)
            try:
                await session.flush()
            except IntegrityError:
                # A concurrent submission won the race between check and insert
                raise DuplicateRsvpError(event_id, rsvp.email)
            return rsvp_to_dto(record)

    async def delete_rsvp(self, rsvp_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(Rsvp).where(Rsvp.uuid == rsvp_id))
            rsvp = result.scalar_one_or_none()
            if not rsvp:
                raise RsvpNotFoundError(rsvp_id)

            await session.delete(rsvp)
            await session.flush()
