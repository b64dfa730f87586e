"""Gift card payment method.

The balance is the only mutable payment state in the domain: a completed
charge decrements it, a declined charge leaves it untouched.
"""

import logging
from decimal import Decimal

from restaurant_ordering.payments.base_payment import (
    PaymentMethod,
    PaymentResult,
    PaymentType,
    as_money,
    mask_number,
)

logger = logging.getLogger(__name__)


class GiftCardPayment(PaymentMethod):
    """Payment drawn from a prepaid gift card balance."""

    def __init__(self, gift_card_number: str, balance: Decimal | int | float) -> None:
        """Initialize gift card payment.

        Args:
            gift_card_number: Full gift card number
            balance: Starting card balance
        """
        super().__init__(PaymentType.GIFT_CARD)
        self.gift_card_number = gift_card_number
        self.balance = as_money(balance)

    def _charge(self, amount: Decimal) -> PaymentResult:
        if self.balance < amount:
            missing = amount - self.balance
            logger.warning(
                f"Insufficient gift card balance on card ending {mask_number(self.gift_card_number)}: "
                f"need ${missing:.2f} more"
            )
            return self._insufficient(amount, missing)

        self.balance -= amount
        logger.info(f"Gift card payment of ${amount:.2f} accepted, remaining balance ${self.balance:.2f}")
        return self._completed(amount)

    def payment_details(self) -> str:
        return (
            f"Gift Card (**** {mask_number(self.gift_card_number)}) - "
            f"Balance: ${self.balance:.2f}"
        )

    def __repr__(self) -> str:
        return (
            f"GiftCardPayment(last_four={mask_number(self.gift_card_number)!r}, "
            f"balance={self.balance!r})"
        )
