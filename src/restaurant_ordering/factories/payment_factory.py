"""Payment method factory.

Builds the payment variant for a payment type from positional parameters,
validating count and types before anything is constructed.
"""

import logging
from decimal import Decimal
from typing import Any

from restaurant_ordering.errors import InvalidParametersError
from restaurant_ordering.payments.base_payment import PaymentMethod, PaymentType, as_money
from restaurant_ordering.payments.cash_payment import CashPayment
from restaurant_ordering.payments.credit_card_payment import CreditCardPayment
from restaurant_ordering.payments.gift_card_payment import GiftCardPayment
from restaurant_ordering.payments.mobile_payment import MobilePayment

logger = logging.getLogger(__name__)

# Expected positional parameters per payment type
PARAMETER_NAMES: dict[PaymentType, tuple[str, ...]] = {
    PaymentType.CASH: ("amount_given",),
    PaymentType.CREDIT_CARD: ("card_number", "card_holder_name", "expiry_date", "cvv"),
    PaymentType.MOBILE_PAYMENT: ("phone_number", "provider"),
    PaymentType.GIFT_CARD: ("gift_card_number", "balance"),
}


def _to_money(name: str, value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float)):
        raise InvalidParametersError(f"{name} must be a number, got {type(value).__name__}")
    amount = as_money(value)
    if not amount.is_finite() or amount < 0:
        raise InvalidParametersError(f"{name} must be a non-negative amount, got {value}")
    return amount


def _to_text(name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidParametersError(f"{name} must be a non-empty string")
    return value


class PaymentFactory:
    """Factory for payment methods."""

    @staticmethod
    def create_payment(payment_type: PaymentType, *params: Any) -> PaymentMethod:
        """Create the payment method for a payment type.

        Args:
            payment_type: Kind of payment to create
            *params: Kind-specific parameters, see PARAMETER_NAMES

        Returns:
            PaymentMethod: The configured payment variant

        Raises:
            InvalidParametersError: If parameters are missing or mistyped
        """
        try:
            payment_type = PaymentType(payment_type)
        except ValueError:
            raise InvalidParametersError(f"Unknown payment type: {payment_type}") from None

        names = PARAMETER_NAMES[payment_type]
        if len(params) < len(names):
            logger.warning(f"Rejected {payment_type.value} payment with {len(params)} parameters")
            raise InvalidParametersError(
                f"{payment_type.value} payment requires: {', '.join(names)}"
            )

        if payment_type is PaymentType.CASH:
            return CashPayment(_to_money("amount_given", params[0]))

        if payment_type is PaymentType.CREDIT_CARD:
            card_number, holder, expiry, cvv = (
                _to_text(name, value) for name, value in zip(names, params)
            )
            return CreditCardPayment(card_number, holder, expiry, cvv)

        if payment_type is PaymentType.MOBILE_PAYMENT:
            return MobilePayment(
                _to_text("phone_number", params[0]),
                _to_text("provider", params[1]),
            )

        return GiftCardPayment(
            _to_text("gift_card_number", params[0]),
            _to_money("balance", params[1]),
        )

    @classmethod
    def create_cash_payment(cls, amount_given: Decimal | int | float) -> PaymentMethod:
        return cls.create_payment(PaymentType.CASH, amount_given)

    @classmethod
    def create_credit_card_payment(
        cls, card_number: str, card_holder_name: str, expiry_date: str, cvv: str
    ) -> PaymentMethod:
        return cls.create_payment(
            PaymentType.CREDIT_CARD, card_number, card_holder_name, expiry_date, cvv
        )

    @classmethod
    def create_mobile_payment(cls, phone_number: str, provider: str) -> PaymentMethod:
        return cls.create_payment(PaymentType.MOBILE_PAYMENT, phone_number, provider)

    @classmethod
    def create_gift_card_payment(
        cls, gift_card_number: str, balance: Decimal | int | float
    ) -> PaymentMethod:
        return cls.create_payment(PaymentType.GIFT_CARD, gift_card_number, balance)
