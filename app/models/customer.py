"""Customer model"""

from typing import List, Optional
from sqlalchemy import Column, String, Integer, Text, select, func, or_, update as update_stmt
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import validates
import structlog

from app.config import settings
from app.database import Base
from app.exceptions import CustomerNotFound, IdImmutable, EntityAlreadyPersisted, EntityNotPersisted
from app.models.reservation import Reservation

logger = structlog.get_logger()


class Customer(Base):
    """Customer of the restaurant"""
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    phone = Column(String(40))
    notes = Column(Text, nullable=False, default="")

    def __init__(self, **kwargs):
        kwargs.setdefault("notes", "")
        super().__init__(**kwargs)

    @validates("id")
    def validate_id(self, key, value):
        if self.id is not None and self.id != value:
            raise IdImmutable("customer", self.id, value)
        return value

    @validates("phone")
    def validate_phone(self, key, value):
        return value or None

    @validates("notes")
    def validate_notes(self, key, value):
        # Blank string, never NULL
        return value or ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @classmethod
    async def all(cls, db: AsyncSession) -> List["Customer"]:
        """Find all customers, ordered by last then first name"""
        result = await db.execute(select(cls).order_by(cls.last_name, cls.first_name))
        return list(result.scalars().all())

    @classmethod
    async def some(cls, db: AsyncSession, name: str) -> List["Customer"]:
        """Find customers whose first or last name contains `name`, ignoring case"""
        term = (name or "").strip()
        if not term:
            return await cls.all(db)

        logger.debug("Searching customers", name=term)

        # % and _ in the term match literally
        result = await db.execute(
            select(cls)
            .where(
                or_(
                    cls.first_name.icontains(term, autoescape=True),
                    cls.last_name.icontains(term, autoescape=True),
                )
            )
            .order_by(cls.last_name, cls.first_name)
        )
        return list(result.scalars().all())

    @classmethod
    async def get(cls, db: AsyncSession, customer_id: int) -> "Customer":
        """Get a customer by id"""
        result = await db.execute(select(cls).where(cls.id == customer_id))
        customer = result.scalar_one_or_none()

        if customer is None:
            raise CustomerNotFound(customer_id)

        return customer

    @classmethod
    async def get_best_customers(cls, db: AsyncSession, limit: Optional[int] = None) -> List["Customer"]:
        """Customers with the most reservations, most first"""
        if limit is None:
            limit = settings.best_customer_limit

        result = await db.execute(
            select(cls)
            .join(Reservation, Reservation.customer_id == cls.id)
            .group_by(cls.id)
            .order_by(func.count(Reservation.id).desc(), cls.last_name, cls.first_name)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_reservations(self, db: AsyncSession) -> List[Reservation]:
        """Get all reservations for this customer"""
        return await Reservation.get_reservations_for_customer(db, self.id)

    async def create(self, db: AsyncSession) -> "Customer":
        """Insert this customer and assign its id"""
        if self.is_persisted:
            raise EntityAlreadyPersisted("Customer", self.id)

        db.add(self)
        await db.commit()
        await db.refresh(self)

        logger.info("Customer inserted", customer_id=self.id)
        return self

    async def update(self, db: AsyncSession) -> "Customer":
        """Write every field of this customer to its row"""
        if not self.is_persisted:
            raise EntityNotPersisted("Customer")

        result = await db.execute(
            update_stmt(Customer)
            .where(Customer.id == self.id)
            .values(
                first_name=self.first_name,
                last_name=self.last_name,
                phone=self.phone,
                notes=self.notes,
            )
        )
        if result.rowcount == 0:
            raise CustomerNotFound(self.id)

        await db.commit()

        logger.info("Customer updated", customer_id=self.id)
        return self

    async def save(self, db: AsyncSession) -> "Customer":
        """Insert when new, otherwise update"""
        if self.is_persisted:
            return await self.update(db)
        return await self.create(db)
