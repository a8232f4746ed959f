"""Reservation API endpoints"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.reservation import Reservation
from app.schemas.reservation import ReservationUpdate, ReservationResponse

router = APIRouter()


@router.get("/{reservation_id}", response_model=ReservationResponse)
async def get_reservation(
    reservation_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get reservation details"""
    return await Reservation.get(db, reservation_id)


@router.put("/{reservation_id}", response_model=ReservationResponse)
async def update_reservation(
    reservation_id: int,
    reservation_data: ReservationUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Replace every field of a reservation"""
    reservation = await Reservation.get(db, reservation_id)

    # customer_id is validated as write-once by the model
    for field, value in reservation_data.model_dump().items():
        setattr(reservation, field, value)

    return await reservation.update(db)
