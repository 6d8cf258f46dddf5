import abc
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventrsvp.config.database import async_session_manager
from eventrsvp.events.dtos import CustomFieldDefinition, EventDTO, RsvpDTO
from eventrsvp.events.repository.orm_models import Event, Rsvp


def event_to_dto(event: Event) -> EventDTO:
    return EventDTO(
        uuid=event.uuid,
        title=event.title,
        description=event.description,
        date=event.date,
        time=event.time,
        location=event.location,
        is_public=event.is_public,
        user_id=event.user_id,
        custom_fields=[CustomFieldDefinition.from_dict(raw) for raw in event.custom_fields or []],
        created_at=event.created_at,
        updated_at=event.updated_at,
    )


def rsvp_to_dto(rsvp: Rsvp) -> RsvpDTO:
    return RsvpDTO(
        uuid=rsvp.uuid,
        event_id=rsvp.event_id,
        name=rsvp.name,
        email=rsvp.email,
        responses=dict(rsvp.responses or {}),
        created_at=rsvp.created_at,
    )


class EventReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_event(self, event_id: UUID) -> EventDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_events(self, user_id: str | None = None) -> list[EventDTO]:
        """
        List events, newest first.
        Restricted to one owner when user_id is given.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def list_public_events(self) -> list[EventDTO]:
        """List public events ordered by date."""
        raise NotImplementedError


class RsvpReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_rsvp(self, rsvp_id: UUID) -> RsvpDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_rsvps(self, event_id: UUID) -> list[RsvpDTO]:
        """List an event's RSVPs, newest first."""
        raise NotImplementedError

    @abc.abstractmethod
    async def list_rsvps_for_events(self, event_ids: list[UUID]) -> list[RsvpDTO]:
        """List RSVPs across several events, newest first."""
        raise NotImplementedError


class SqlEventReadModel(EventReadModel):
    """SQL implementation of event read model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_event(self, event_id: UUID) -> EventDTO | None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(Event).where(Event.uuid == event_id))
            event = result.scalar_one_or_none()
            return event_to_dto(event) if event else None

    async def list_events(self, user_id: str | None = None) -> list[EventDTO]:
        stmt = select(Event).order_by(Event.created_at.desc())
        if user_id is not None:
            stmt = stmt.where(Event.user_id == user_id)
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(stmt)
            return [event_to_dto(event) for event in result.scalars().all()]

    async def list_public_events(self) -> list[EventDTO]:
        stmt = select(Event).where(Event.is_public.is_(True)).order_by(Event.date.asc())
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(stmt)
            return [event_to_dto(event) for event in result.scalars().all()]


class SqlRsvpReadModel(RsvpReadModel):
    """SQL implementation of RSVP read model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_rsvp(self, rsvp_id: UUID) -> RsvpDTO | None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(Rsvp).where(Rsvp.uuid == rsvp_id))
            rsvp = result.scalar_one_or_none()
            return rsvp_to_dto(rsvp) if rsvp else None

    async def list_rsvps(self, event_id: UUID) -> list[RsvpDTO]:
        return await self.list_rsvps_for_events([event_id])

    async def list_rsvps_for_events(self, event_ids: list[UUID]) -> list[RsvpDTO]:
        if not event_ids:
            return []
        stmt = (
            select(Rsvp)
            .where(Rsvp.event_id.in_(event_ids))
            .order_by(Rsvp.created_at.desc())
        )
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(stmt)
            return [rsvp_to_dto(rsvp) for rsvp in result.scalars().all()]
