"""
Member service for member-related business logic.
"""
from sqlalchemy import update
from sqlalchemy.orm import Session
from typing import Any, List, Mapping
from tripboard.core.errors import NotFound, ValidationError
from tripboard.db.base import utcnow
from tripboard.models.member import (
    Member, PaymentStatus, TaskStatus, TransportType, UPDATABLE_FIELDS
)
import logging

logger = logging.getLogger(__name__)

SEED_MEMBERS = [
    {
        "name": "Alice",
        "task_status": TaskStatus.PENDING.value,
        "transport_type": TransportType.CAR.value,
        "eta": "",
        "payment_status": PaymentStatus.UNPAID.value,
    },
    {
        "name": "Bob",
        "task_status": TaskStatus.PENDING.value,
        "transport_type": TransportType.PLANE.value,
        "eta": "",
        "payment_status": PaymentStatus.UNPAID.value,
    },
]


def list_members(db: Session) -> List[Member]:
    """Get all members in creation order."""
    return db.query(Member).order_by(Member.id.asc()).all()


def seed_members(db: Session) -> int:
    """Insert the sample members if the store is empty.

    Returns the number of inserted rows (0 when the store already had data).
    """
    if db.query(Member.id).first() is not None:
        return 0

    for data in SEED_MEMBERS:
        db.add(Member(**data))
    db.commit()

    logger.info(f"Seeded {len(SEED_MEMBERS)} sample members")
    return len(SEED_MEMBERS)


def update_member(member_id: int, fields: Mapping[str, Any], db: Session) -> Member:
    """
    Overwrite only the supplied recognized fields of a member.

    Keys outside UPDATABLE_FIELDS are ignored. Raises ValidationError when
    nothing recognized is left, NotFound when the member does not exist.
    """
    values = {key: fields[key] for key in UPDATABLE_FIELDS if key in fields}
    if not values:
        raise ValidationError("No valid fields provided")

    # Column-level UPDATE so concurrent writers on other fields are not clobbered
    result = db.execute(
        update(Member)
        .where(Member.id == member_id)
        .values(**values, updated_at=utcnow())
    )
    if result.rowcount == 0:
        db.rollback()
        raise NotFound("Member not found")
    db.commit()

    logger.info(f"Updated member {member_id}: {sorted(values)}")
    return db.query(Member).filter(Member.id == member_id).first()
