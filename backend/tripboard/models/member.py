"""
Member model for trip participants.
"""
from sqlalchemy import Column, String
from tripboard.db.base import BaseModel
import enum


class PaymentStatus(str, enum.Enum):
    """Known payment states."""
    UNPAID = "unpaid"
    PAID = "paid"


class TaskStatus(str, enum.Enum):
    """Known packing/preparation states."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class TransportType(str, enum.Enum):
    """Known modes of travel."""
    CAR = "car"
    PLANE = "plane"
    TRAIN = "train"
    BUS = "bus"
    SHIP = "ship"


# Columns a client may change through a partial update. `name` is set once at seed time.
UPDATABLE_FIELDS = ("task_status", "transport_type", "eta", "payment_status")


class Member(BaseModel):
    """One row per trip participant."""
    __tablename__ = "members"

    name = Column(String(100), nullable=False)
    # Stored as free-form strings; the enums above only name the values the backend itself writes
    task_status = Column(String(50), nullable=True)
    transport_type = Column(String(50), nullable=True)
    eta = Column(String(50), nullable=True)
    payment_status = Column(String(50), nullable=True)
