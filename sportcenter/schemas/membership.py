from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime

from sportcenter.services.membership import days_remaining, is_membership_active


class MembershipResponse(BaseModel):
    id: int
    start_date: date
    end_date: date
    status: str
    payment_status: str
    amount_paid: float
    is_active: bool
    days_remaining: int

    @classmethod
    def from_membership(cls, membership, now: Optional[datetime] = None):
        if membership is None:
            return None
        now = now or datetime.now()
        return cls(
            id=membership.id,
            start_date=membership.start_date,
            end_date=membership.end_date,
            status=membership.status,
            payment_status=membership.payment_status,
            amount_paid=membership.amount_paid,
            is_active=is_membership_active(membership, now),
            days_remaining=days_remaining(membership, now),
        )


class PaymentRequest(BaseModel):
    membership_id: int
    payment_method: Optional[str] = None


class PaymentResponse(BaseModel):
    id: int
    membership_id: int
    amount: float
    payment_method: str
    transaction_id: Optional[str] = None
    status: str
    payment_date: Optional[datetime] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PaymentHistoryItem(PaymentResponse):
    start_date: date
    end_date: date
    membership_status: str

    @classmethod
    def from_payment(cls, payment):
        return cls(
            id=payment.id,
            membership_id=payment.membership_id,
            amount=payment.amount,
            payment_method=payment.payment_method,
            transaction_id=payment.transaction_id,
            status=payment.status,
            payment_date=payment.payment_date,
            created_at=payment.created_at,
            start_date=payment.membership.start_date,
            end_date=payment.membership.end_date,
            membership_status=payment.membership.status,
        )
