"""Customer API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.database import get_db
from app.models.customer import Customer
from app.models.reservation import Reservation
from app.schemas.customer import (
    CustomerCreate,
    CustomerUpdate,
    CustomerResponse,
    CustomerDetailResponse,
)
from app.schemas.reservation import ReservationCreate, ReservationResponse

router = APIRouter()
logger = structlog.get_logger()


@router.get("", response_model=List[CustomerResponse])
async def list_customers(
    search: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """List customers, optionally filtered by name"""
    if search:
        return await Customer.some(db, search)
    return await Customer.all(db)


@router.get("/best", response_model=List[CustomerResponse])
async def best_customers(db: AsyncSession = Depends(get_db)):
    """Customers with the most reservations"""
    return await Customer.get_best_customers(db)


@router.post("", response_model=CustomerResponse, status_code=201)
async def create_customer(
    customer_data: CustomerCreate,
    db: AsyncSession = Depends(get_db),
):
    """Add a new customer"""
    customer = Customer(**customer_data.model_dump())
    return await customer.create(db)


@router.get("/{customer_id}", response_model=CustomerDetailResponse)
async def get_customer(
    customer_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Customer details with their reservations"""
    customer = await Customer.get(db, customer_id)
    reservations = await customer.get_reservations(db)

    return CustomerDetailResponse(
        **CustomerResponse.model_validate(customer).model_dump(),
        reservations=[ReservationResponse.model_validate(r) for r in reservations],
    )


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: int,
    customer_data: CustomerUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Replace every field of a customer"""
    customer = await Customer.get(db, customer_id)

    for field, value in customer_data.model_dump().items():
        setattr(customer, field, value)

    return await customer.update(db)


@router.get("/{customer_id}/reservations", response_model=List[ReservationResponse])
async def list_customer_reservations(
    customer_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Reservations made by a customer"""
    customer = await Customer.get(db, customer_id)
    return await customer.get_reservations(db)


@router.post("/{customer_id}/reservations", response_model=ReservationResponse, status_code=201)
async def create_reservation(
    customer_id: int,
    reservation_data: ReservationCreate,
    db: AsyncSession = Depends(get_db),
):
    """Book a reservation for a customer"""
    customer = await Customer.get(db, customer_id)

    reservation = Reservation(
        customer_id=customer.id,
        num_guests=reservation_data.num_guests,
        start_at=reservation_data.start_at,
        notes=reservation_data.notes,
    )
    await reservation.create(db)

    logger.info("Reservation booked", customer=customer.full_name, start_at=reservation.formatted_start_at)
    return reservation
