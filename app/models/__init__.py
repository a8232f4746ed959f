"""Database models"""

from app.models.reservation import Reservation
from app.models.customer import Customer

__all__ = [
    "Customer",
    "Reservation",
]
