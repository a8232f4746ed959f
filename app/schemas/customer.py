"""Customer schemas"""

from typing import Optional, List
from pydantic import BaseModel

from app.schemas.reservation import ReservationResponse


class CustomerCreate(BaseModel):
    """Create customer request"""
    first_name: str
    last_name: str
    phone: Optional[str] = None
    notes: Optional[str] = None


class CustomerUpdate(BaseModel):
    """Full update of a customer"""
    first_name: str
    last_name: str
    phone: Optional[str] = None
    notes: Optional[str] = None


class CustomerResponse(BaseModel):
    """Customer response"""
    id: int
    first_name: str
    last_name: str
    full_name: str
    phone: Optional[str]
    notes: str

    class Config:
        from_attributes = True


class CustomerDetailResponse(CustomerResponse):
    """Customer with their reservations"""
    reservations: List[ReservationResponse] = []
