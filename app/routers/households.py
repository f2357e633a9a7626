"""
Household and household member API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.schemas.auth import Identity
from app.schemas.common import MessageResponse
from app.schemas.household import (
    HouseholdCreate,
    HouseholdOut,
    HouseholdUpdate,
    HouseholdWithResidentsCreate,
    HouseholdWithResidentsOut,
    MemberCreate,
    MemberOut,
)
from app.services.household_service import HouseholdService

router = APIRouter()

# Mounted separately at /households-with-residents
composite_router = APIRouter()


@router.get("", response_model=List[HouseholdOut])
def list_households(db: Session = Depends(get_db)):
    """List households with their live member counts."""
    return HouseholdService(db).list_households()


@router.get("/{household_id}", response_model=HouseholdOut)
def get_household(household_id: int, db: Session = Depends(get_db)):
    return HouseholdService(db).get_household(household_id)


@router.post("", response_model=HouseholdOut, status_code=status.HTTP_201_CREATED)
def create_household(
    body: HouseholdCreate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    return HouseholdService(db).create_household(body.model_dump(), actor=current_user)


@router.put("/{household_id}", response_model=HouseholdOut)
def update_household(
    household_id: int,
    body: HouseholdUpdate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    """
    Update a household.

    - **num_members** is never stored below the actual number of members
    """
    return HouseholdService(db).update_household(household_id, body.model_dump(), actor=current_user)


@router.delete("/{household_id}", response_model=MessageResponse)
def delete_household(
    household_id: int,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    HouseholdService(db).delete_household(household_id, actor=current_user)
    return {"message": "Household deleted successfully."}


@router.get("/{household_id}/members", response_model=List[MemberOut])
def list_members(household_id: int, db: Session = Depends(get_db)):
    return HouseholdService(db).list_members(household_id)


@router.post("/{household_id}/members", status_code=status.HTTP_201_CREATED)
def add_member(
    household_id: int,
    body: MemberCreate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    return HouseholdService(db).add_member(household_id, body.model_dump(), actor=current_user)


@router.delete("/{household_id}/members/{member_id}", response_model=MessageResponse)
def remove_member(
    household_id: int,
    member_id: int,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    HouseholdService(db).remove_member(household_id, member_id, actor=current_user)
    return {"message": "Member removed from household."}


@composite_router.post("", response_model=HouseholdWithResidentsOut, status_code=status.HTTP_201_CREATED)
def create_household_with_residents(
    body: HouseholdWithResidentsCreate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    """
    Create a household and its initial residents in one transaction.

    Either everything is saved or nothing is; a failure names the resident
    position that caused it.
    """
    return HouseholdService(db).create_with_residents(body.model_dump(), actor=current_user)
