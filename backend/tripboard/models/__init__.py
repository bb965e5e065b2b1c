"""Models package - Import all models for SQLAlchemy registration."""
from tripboard.models.member import (
    Member, PaymentStatus, TaskStatus, TransportType, UPDATABLE_FIELDS
)
from tripboard.models.photo import Photo

__all__ = [
    "Member",
    "PaymentStatus",
    "TaskStatus",
    "TransportType",
    "UPDATABLE_FIELDS",
    "Photo",
]
