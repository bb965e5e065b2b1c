"""
Pydantic schemas for Member entity.
"""
from pydantic import BaseModel
from typing import Optional


class MemberResponse(BaseModel):
    """Schema for member response."""
    id: int
    name: str
    task_status: Optional[str] = None
    transport_type: Optional[str] = None
    eta: Optional[str] = None
    payment_status: Optional[str] = None

    class Config:
        from_attributes = True


class MemberUpdate(BaseModel):
    """Schema for partial member update.

    Unknown keys are dropped rather than rejected. Only keys the client
    actually sent end up in ``model_dump(exclude_unset=True)``.
    """
    task_status: Optional[str] = None
    transport_type: Optional[str] = None
    eta: Optional[str] = None
    payment_status: Optional[str] = None

    class Config:
        extra = "ignore"
