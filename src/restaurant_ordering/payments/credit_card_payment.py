"""Credit card payment method.

No authorization is performed; the charge always completes.
"""

import logging
from decimal import Decimal

from restaurant_ordering.payments.base_payment import (
    PaymentMethod,
    PaymentResult,
    PaymentType,
    mask_number,
)

logger = logging.getLogger(__name__)


class CreditCardPayment(PaymentMethod):
    """Payment by credit card."""

    def __init__(
        self,
        card_number: str,
        card_holder_name: str,
        expiry_date: str,
        cvv: str,
    ) -> None:
        """Initialize credit card payment.

        Args:
            card_number: Full card number
            card_holder_name: Name printed on the card
            expiry_date: Expiry in MM/YY form
            cvv: Card security code
        """
        super().__init__(PaymentType.CREDIT_CARD)
        self.card_number = card_number
        self.card_holder_name = card_holder_name
        self.expiry_date = expiry_date
        self._cvv = cvv

    @property
    def last_four(self) -> str:
        return mask_number(self.card_number)

    def _charge(self, amount: Decimal) -> PaymentResult:
        logger.info(f"Credit card payment of ${amount:.2f} authorized on card ending {self.last_four}")
        return self._completed(amount)

    def payment_details(self) -> str:
        return f"Credit Card - {self.card_holder_name} (**** {self.last_four})"

    def __repr__(self) -> str:
        return f"CreditCardPayment(card_holder_name={self.card_holder_name!r}, last_four={self.last_four!r})"
