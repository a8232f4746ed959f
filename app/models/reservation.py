"""Reservation model"""

from datetime import datetime, timezone
from typing import List
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Text, select, update as update_stmt
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import validates
import structlog

from app.database import Base
from app.exceptions import (
    InvalidStartAt,
    InvalidGuestCount,
    CustomerIdImmutable,
    IdImmutable,
    ReservationNotFound,
    EntityAlreadyPersisted,
    EntityNotPersisted,
)

logger = structlog.get_logger()


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


class Reservation(Base):
    """A reservation for a party"""
    __tablename__ = "reservations"

    id = Column(Integer, primary_key=True)
    # Customer is referenced by id only, no relationship
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    num_guests = Column(Integer, nullable=False)
    start_at = Column(DateTime, nullable=False)
    notes = Column(Text, nullable=False, default="")

    def __init__(self, **kwargs):
        kwargs.setdefault("notes", "")
        super().__init__(**kwargs)

    @validates("id")
    def validate_id(self, key, value):
        if self.id is not None and self.id != value:
            raise IdImmutable("reservation", self.id, value)
        return value

    @validates("start_at")
    def validate_start_at(self, key, value):
        if not isinstance(value, datetime):
            raise InvalidStartAt(value)
        # Column is naive; aware values are stored as UTC
        if value.tzinfo is not None and value.utcoffset() is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    @validates("num_guests")
    def validate_num_guests(self, key, value):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise InvalidGuestCount(value)
        return value

    @validates("customer_id")
    def validate_customer_id(self, key, value):
        # Can only be set once
        if self.customer_id and self.customer_id != value:
            raise CustomerIdImmutable(self.customer_id, value)
        return value

    @validates("notes")
    def validate_notes(self, key, value):
        return value or ""

    @property
    def formatted_start_at(self) -> str:
        """Human readable start time, e.g. 'January 1st 2024, 6:00 pm'"""
        start = self.start_at
        hour = start.hour % 12 or 12
        meridiem = "am" if start.hour < 12 else "pm"
        return f"{start:%B} {_ordinal(start.day)} {start.year}, {hour}:{start.minute:02d} {meridiem}"

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @classmethod
    async def get_reservations_for_customer(cls, db: AsyncSession, customer_id: int) -> List["Reservation"]:
        """Given a customer id, find their reservations"""
        result = await db.execute(select(cls).where(cls.customer_id == customer_id))
        return list(result.scalars().all())

    @classmethod
    async def get(cls, db: AsyncSession, reservation_id: int) -> "Reservation":
        """Find a reservation by id"""
        result = await db.execute(select(cls).where(cls.id == reservation_id))
        reservation = result.scalars().first()

        if reservation is None:
            raise ReservationNotFound(reservation_id)

        return reservation

    async def create(self, db: AsyncSession) -> "Reservation":
        """Insert this reservation and assign its id"""
        if self.is_persisted:
            raise EntityAlreadyPersisted("Reservation", self.id)

        db.add(self)
        await db.commit()
        await db.refresh(self)

        logger.info("Reservation inserted", reservation_id=self.id, customer_id=self.customer_id)
        return self

    async def update(self, db: AsyncSession) -> "Reservation":
        """Write every field of this reservation to its row"""
        if not self.is_persisted:
            raise EntityNotPersisted("Reservation")

        result = await db.execute(
            update_stmt(Reservation)
            .where(Reservation.id == self.id)
            .values(
                customer_id=self.customer_id,
                num_guests=self.num_guests,
                start_at=self.start_at,
                notes=self.notes,
            )
        )
        if result.rowcount == 0:
            raise ReservationNotFound(self.id)

        await db.commit()

        logger.info("Reservation updated", reservation_id=self.id)
        return self

    async def save(self, db: AsyncSession) -> "Reservation":
        """Insert when new, otherwise update"""
        if self.is_persisted:
            return await self.update(db)
        return await self.create(db)
