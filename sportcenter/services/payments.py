from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
import logging
import secrets
import string
import time

from sportcenter.models.payment import TransactionStatus

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_METHOD = "swish"


@dataclass
class PaymentResult:
    transaction_id: str
    status: str
    processed_at: datetime

    @property
    def succeeded(self) -> bool:
        return self.status == TransactionStatus.COMPLETED.value


class PaymentProcessor(ABC):
    """Gateway used to charge a membership fee."""

    @abstractmethod
    def charge(self, amount: float, method: str, reference: str) -> PaymentResult:
        raise NotImplementedError


class MockPaymentProcessor(PaymentProcessor):
    """Accepts every charge. Stands in until Swish is integrated."""

    _alphabet = string.ascii_lowercase + string.digits

    def _transaction_id(self) -> str:
        suffix = "".join(secrets.choice(self._alphabet) for _ in range(9))
        return f"mock_txn_{int(time.time() * 1000)}_{suffix}"

    def charge(self, amount: float, method: str, reference: str) -> PaymentResult:
        result = PaymentResult(
            transaction_id=self._transaction_id(),
            status=TransactionStatus.COMPLETED.value,
            processed_at=datetime.utcnow(),
        )
        logger.info(
            f"Mock charge of {amount:.2f} via {method} for {reference}: "
            f"{result.transaction_id}"
        )
        return result
