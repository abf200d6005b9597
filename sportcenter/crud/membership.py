from datetime import date, datetime
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from sportcenter.database import commit
from sportcenter.models.membership import Membership, MembershipStatus, PaymentStatus
from sportcenter.models.payment import Payment, TransactionStatus
from sportcenter.services import membership as terms

logger = logging.getLogger(__name__)


def build_membership(user_id: Optional[int], start: date) -> Membership:
    start_date, end_date = terms.new_term(start)
    return Membership(
        user_id=user_id,
        start_date=start_date,
        end_date=end_date,
        status=MembershipStatus.ACTIVE.value,
        payment_status=PaymentStatus.PENDING.value,
        amount_paid=terms.TERM_PRICE,
    )


def get_membership_for_user(
    db: Session, membership_id: int, user_id: int
) -> Optional[Membership]:
    return (
        db.query(Membership)
        .filter(Membership.id == membership_id, Membership.user_id == user_id)
        .first()
    )


def get_latest_membership(db: Session, user_id: int) -> Optional[Membership]:
    """Most recently created membership, whatever its state."""
    return (
        db.query(Membership)
        .filter(Membership.user_id == user_id)
        .order_by(Membership.created_at.desc(), Membership.id.desc())
        .first()
    )


def get_current_membership(db: Session, user_id: int) -> Optional[Membership]:
    """The active-status membership that runs the longest."""
    return (
        db.query(Membership)
        .filter(
            Membership.user_id == user_id,
            Membership.status == MembershipStatus.ACTIVE.value,
        )
        .order_by(Membership.end_date.desc(), Membership.id.desc())
        .first()
    )


def renew_membership(
    db: Session, user_id: int, now: Optional[datetime] = None
) -> Membership:
    current = get_current_membership(db, user_id)
    start = terms.renewal_start(current, now)
    db_membership = build_membership(user_id, start)
    db.add(db_membership)
    commit(db)
    db.refresh(db_membership)
    logger.info(
        f"Membership {db_membership.id} created for user {user_id}: "
        f"{db_membership.start_date} - {db_membership.end_date}"
    )
    return db_membership


def record_payment(
    db: Session,
    db_membership: Membership,
    payment_method: str,
    transaction_id: str,
    status: str,
    payment_date: datetime,
) -> Payment:
    """Store a payment attempt and mirror its outcome on the membership."""
    succeeded = status == TransactionStatus.COMPLETED.value
    db_membership.payment_status = (
        PaymentStatus.PAID.value if succeeded else PaymentStatus.FAILED.value
    )
    db_payment = Payment(
        membership_id=db_membership.id,
        amount=db_membership.amount_paid,
        payment_method=payment_method,
        transaction_id=transaction_id,
        status=status,
        payment_date=payment_date,
    )
    db.add(db_payment)
    commit(db)
    db.refresh(db_payment)
    return db_payment


def get_payments_for_user(db: Session, user_id: int) -> List[Payment]:
    return (
        db.query(Payment)
        .join(Membership)
        .filter(Membership.user_id == user_id)
        .order_by(Payment.created_at.desc(), Payment.id.desc())
        .all()
    )
