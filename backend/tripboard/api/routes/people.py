"""
Member routes: listing and partial update of trip-prep fields.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from tripboard.db.session import get_db
from tripboard.schemas.member import MemberResponse, MemberUpdate
from tripboard.services import member_service

router = APIRouter(prefix="/people", tags=["people"])


@router.get("", response_model=List[MemberResponse])
def list_people(db: Session = Depends(get_db)):
    """List all members in creation order."""
    return member_service.list_members(db)


@router.patch("/{member_id}", response_model=MemberResponse)
def update_person(
    member_id: int,
    payload: Optional[MemberUpdate] = None,
    db: Session = Depends(get_db)
):
    """Update only the supplied fields of a member.

    Unrecognized keys are ignored; a body with no recognized key is a 400.
    """
    fields = payload.model_dump(exclude_unset=True) if payload else {}
    return member_service.update_member(member_id, fields, db)
