"""Reservation schemas"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class ReservationCreate(BaseModel):
    """Create reservation request"""
    num_guests: int
    start_at: datetime
    notes: Optional[str] = None


class ReservationUpdate(BaseModel):
    """Full update of a reservation"""
    customer_id: int
    num_guests: int
    start_at: datetime
    notes: Optional[str] = None


class ReservationResponse(BaseModel):
    """Reservation response"""
    id: int
    customer_id: int
    num_guests: int
    start_at: datetime
    formatted_start_at: str
    notes: str

    class Config:
        from_attributes = True
