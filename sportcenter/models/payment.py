from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from sportcenter.database import Base


class TransactionStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    membership_id = Column(
        Integer, ForeignKey("memberships.id", ondelete="CASCADE"), nullable=False
    )
    amount = Column(Float, nullable=False)
    payment_method = Column(String, nullable=False)  # swish, bank_transfer, ...
    transaction_id = Column(String, unique=True)
    status = Column(String, nullable=False)
    payment_date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    membership = relationship("Membership", back_populates="payments")
