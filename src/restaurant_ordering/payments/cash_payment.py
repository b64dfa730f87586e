"""Cash payment method."""

import logging
from decimal import Decimal

from restaurant_ordering.payments.base_payment import (
    PaymentMethod,
    PaymentResult,
    PaymentType,
    as_money,
)

logger = logging.getLogger(__name__)


class CashPayment(PaymentMethod):
    """Payment with cash handed over at the counter.

    The payment completes only when the cash given covers the amount.
    """

    def __init__(self, amount_given: Decimal | int | float) -> None:
        """Initialize cash payment.

        Args:
            amount_given: Cash handed over by the customer
        """
        super().__init__(PaymentType.CASH)
        self.amount_given = as_money(amount_given)
        self.change = Decimal("0")

    def _charge(self, amount: Decimal) -> PaymentResult:
        if self.amount_given < amount:
            missing = amount - self.amount_given
            logger.warning(f"Insufficient cash: need ${missing:.2f} more")
            return self._insufficient(amount, missing)

        self.change = self.amount_given - amount
        logger.info(f"Cash payment of ${amount:.2f} accepted, change ${self.change:.2f}")
        return self._completed(amount, change=self.change)

    def payment_details(self) -> str:
        return f"Cash Payment - Amount Given: ${self.amount_given:.2f}"
