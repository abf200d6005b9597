from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from sportcenter.crud import membership as membership_crud
from sportcenter.crud import user as user_crud
from sportcenter.database import get_db
from sportcenter.errors import NotFound
from sportcenter.models.user import User
from sportcenter.schemas.membership import MembershipResponse, PaymentHistoryItem
from sportcenter.schemas.user import ProfileUpdate, UserResponse
from sportcenter.services.auth import require_member, require_ownership_or_admin

# Every route here needs a member or admin token
router = APIRouter(dependencies=[Depends(require_member)])


def _membership_status(db: Session, user_id: int) -> dict:
    membership = membership_crud.get_current_membership(db, user_id)
    if membership is None:
        return {"status": "no_active_membership"}
    return {"membership": MembershipResponse.from_membership(membership)}


@router.get("/profile")
def read_profile(
    db: Session = Depends(get_db), current_user: User = Depends(require_member)
):
    membership = membership_crud.get_current_membership(db, current_user.id)
    payments = membership_crud.get_payments_for_user(db, current_user.id)
    return {
        "user": UserResponse.model_validate(current_user),
        "membership": MembershipResponse.from_membership(membership),
        "payments": [PaymentHistoryItem.from_payment(p) for p in payments],
    }


@router.put("/profile")
def update_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_member),
):
    changes = payload.model_dump(exclude_none=True)
    user = user_crud.update_profile(db, current_user, changes)
    return {
        "message": "Profile updated successfully",
        "user": UserResponse.model_validate(user),
    }


@router.post("/membership/renew", status_code=status.HTTP_201_CREATED)
def renew_membership(
    db: Session = Depends(get_db), current_user: User = Depends(require_member)
):
    membership = membership_crud.renew_membership(db, current_user.id)
    return {
        "message": "Membership renewal initiated",
        "membership": MembershipResponse.from_membership(membership),
    }


@router.get("/payments", response_model=List[PaymentHistoryItem])
def read_payments(
    db: Session = Depends(get_db), current_user: User = Depends(require_member)
):
    payments = membership_crud.get_payments_for_user(db, current_user.id)
    return [PaymentHistoryItem.from_payment(payment) for payment in payments]


@router.get("/membership/status")
def read_membership_status(
    db: Session = Depends(get_db), current_user: User = Depends(require_member)
):
    return _membership_status(db, current_user.id)


@router.get("/users/{user_id}/membership/status")
def read_user_membership_status(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_ownership_or_admin("user_id")),
):
    if user_crud.get_user_by_id(db, user_id) is None:
        raise NotFound("User not found")
    return _membership_status(db, user_id)
