from datetime import datetime
from typing import Any
from uuid import UUID

import sqlalchemy as sa
from sqlalchemy import Boolean, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from eventrsvp.config.table_names import TableNames
from eventrsvp.models.base import Base, TimeStamp, utcnow


class Event(Base, TimeStamp):
    __tablename__ = TableNames.EVENTS.value

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    # Free-form strings as entered on the event form
    date: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    time: Mapped[str] = mapped_column(String(50), nullable=False)
    location: Mapped[str] = mapped_column(String(500), nullable=False)
    is_public: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)
    # Identity issued by the auth provider
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # Ordered list of {"name", "type", "required"}; order is form and export order
    custom_fields: Mapped[list[dict[str, Any]]] = mapped_column(sa.JSON, default=list, nullable=False)

    def __repr__(self) -> str:
        return f"<Event {self.title} on {self.date}>"


class Rsvp(Base):
    __tablename__ = TableNames.RSVPS.value
    __table_args__ = (UniqueConstraint("event_id", "email", name="uq_rsvps_event_email"),)

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    responses: Mapped[dict[str, Any]] = mapped_column(sa.JSON, default=dict, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=utcnow,
        server_default=sa.func.current_timestamp(),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Rsvp {self.email} for event {self.event_id}>"
