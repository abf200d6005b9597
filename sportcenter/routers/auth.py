from datetime import date
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
import logging

from sportcenter.config import Settings
from sportcenter.crud import membership as membership_crud
from sportcenter.crud import user as user_crud
from sportcenter.database import StorageError, commit, get_db
from sportcenter.errors import BadRequest, Conflict, InternalError, NotFound
from sportcenter.models.membership import PaymentStatus
from sportcenter.models.user import User
from sportcenter.schemas.membership import MembershipResponse, PaymentRequest
from sportcenter.schemas.user import (
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
    UserResponse,
    UserSummary,
)
from sportcenter.services.auth import (
    authenticate_user,
    create_access_token,
    get_current_user,
    get_password_hash,
    get_settings,
)
from sportcenter.services.payments import DEFAULT_PAYMENT_METHOD, PaymentProcessor

router = APIRouter()

logger = logging.getLogger(__name__)


def get_payment_processor(request: Request) -> PaymentProcessor:
    return request.app.state.payment_processor


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    data = payload.model_dump()

    if user_crud.get_user_by_email(db, data["email"]):
        raise Conflict("User with this email already exists")
    if user_crud.get_user_by_personnummer(db, data["personnummer"]):
        raise Conflict("User with this personnummer already exists")

    # User and first membership are stored together or not at all
    db_user = user_crud.build_member(data, get_password_hash(data["password"]))
    db_membership = membership_crud.build_membership(None, date.today())
    db_user.memberships.append(db_membership)
    db.add(db_user)
    try:
        commit(db)
    except StorageError as exc:
        if exc.is_duplicate:
            raise Conflict("User with this email or personnummer already exists")
        raise
    db.refresh(db_user)
    db.refresh(db_membership)

    logger.info(f"Member registered: {db_user.id} ({db_user.email})")
    return {
        "message": "Registration successful",
        "token": create_access_token(db_user, settings),
        "user": UserSummary.model_validate(db_user),
        "membership": MembershipResponse.from_membership(db_membership),
    }


@router.post("/login")
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = authenticate_user(db, payload.email, payload.password)
    return {
        "message": "Login successful",
        "token": create_access_token(user, settings),
        "user": UserSummary.model_validate(user),
    }


@router.get("/profile")
def read_profile(
    db: Session = Depends(get_db), current_user: User = Depends(get_current_user)
):
    membership = membership_crud.get_latest_membership(db, current_user.id)
    return {
        "user": UserResponse.model_validate(current_user),
        "membership": MembershipResponse.from_membership(membership),
    }


@router.put("/profile")
def update_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    changes = payload.model_dump(exclude_none=True)
    user = user_crud.update_profile(db, current_user, changes)
    return {
        "message": "Profile updated successfully",
        "user": UserResponse.model_validate(user),
    }


@router.post("/payment")
def process_payment(
    payload: PaymentRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    processor: PaymentProcessor = Depends(get_payment_processor),
):
    db_membership = membership_crud.get_membership_for_user(
        db, payload.membership_id, current_user.id
    )
    if db_membership is None:
        raise NotFound("Membership not found")
    if db_membership.payment_status == PaymentStatus.PAID.value:
        raise BadRequest("Membership already paid")

    payment_method = payload.payment_method or DEFAULT_PAYMENT_METHOD
    result = processor.charge(
        db_membership.amount_paid,
        payment_method,
        reference=f"membership-{db_membership.id}",
    )
    db_payment = membership_crud.record_payment(
        db,
        db_membership,
        payment_method=payment_method,
        transaction_id=result.transaction_id,
        status=result.status,
        payment_date=result.processed_at,
    )

    if not result.succeeded:
        logger.warning(
            f"Payment {result.transaction_id} for membership {db_membership.id} "
            f"failed with status {result.status}"
        )
        raise InternalError("Payment processing failed")

    logger.info(
        f"Membership {db_membership.id} paid by user {current_user.id}: "
        f"{result.transaction_id}"
    )
    return {
        "message": "Payment processed successfully",
        "payment": {
            "transaction_id": db_payment.transaction_id,
            "amount": db_payment.amount,
            "payment_method": db_payment.payment_method,
            "status": db_payment.status,
        },
    }
