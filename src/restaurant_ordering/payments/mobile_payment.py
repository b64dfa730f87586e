"""Mobile wallet payment method (Apple Pay, Google Pay, etc.)."""

import logging
from decimal import Decimal

from restaurant_ordering.payments.base_payment import (
    PaymentMethod,
    PaymentResult,
    PaymentType,
)

logger = logging.getLogger(__name__)


class MobilePayment(PaymentMethod):
    """Payment confirmed on the customer's mobile device."""

    def __init__(self, phone_number: str, provider: str) -> None:
        """Initialize mobile payment.

        Args:
            phone_number: Phone the payment request is sent to
            provider: Wallet provider name
        """
        super().__init__(PaymentType.MOBILE_PAYMENT)
        self.phone_number = phone_number
        self.provider = provider

    def _charge(self, amount: Decimal) -> PaymentResult:
        logger.info(f"Mobile payment of ${amount:.2f} confirmed via {self.provider}")
        return self._completed(amount)

    def payment_details(self) -> str:
        return f"Mobile Payment - {self.provider} ({self.phone_number})"
