"""Base class for payment methods.

This module defines the abstract base class that all payment methods must implement.
A declined payment is an expected business outcome, so execute() reports it
through PaymentResult rather than raising. Only malformed input raises.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from restaurant_ordering.errors import InvalidParametersError


class PaymentType(str, Enum):
    """Enumeration of supported payment kinds."""

    CASH = "cash"
    CREDIT_CARD = "credit_card"
    MOBILE_PAYMENT = "mobile_payment"
    GIFT_CARD = "gift_card"


class PaymentStatus(str, Enum):
    """Enumeration of payment outcomes."""

    COMPLETED = "completed"
    INSUFFICIENT_FUNDS = "insufficient_funds"


@dataclass
class PaymentResult:
    """Result of executing a payment.

    Attributes:
        status: Whether the payment completed or was short of funds
        payment_type: Kind of payment method that was charged
        amount: Amount that was requested
        change: Change handed back (cash only)
        missing_amount: How much more was needed when funds were insufficient
        details: Masked summary of the payment method
    """

    status: PaymentStatus
    payment_type: PaymentType
    amount: Decimal
    change: Decimal = Decimal("0")
    missing_amount: Decimal = Decimal("0")
    details: str = ""

    @property
    def success(self) -> bool:
        """Whether the payment completed."""
        return self.status is PaymentStatus.COMPLETED

    @property
    def insufficient_funds(self) -> bool:
        """Whether the payment was declined for lack of funds."""
        return self.status is PaymentStatus.INSUFFICIENT_FUNDS


def mask_number(number: str) -> str:
    """Return only the last four characters of a card-style number."""
    return number[-4:]


def as_money(value: Decimal | int | float) -> Decimal:
    """Convert a numeric amount to Decimal, going through str for floats."""
    return value if isinstance(value, Decimal) else Decimal(str(value))


class PaymentMethod(ABC):
    """Abstract base class for payment methods.

    Concrete variants (cash, credit card, mobile, gift card) inherit from this
    class and implement the abstract methods.
    """

    def __init__(self, payment_type: PaymentType) -> None:
        """Initialize the payment method.

        Args:
            payment_type: Kind of payment this method represents
        """
        self.payment_type = payment_type

    def execute(self, amount: Decimal) -> PaymentResult:
        """Charge an amount to this payment method.

        Args:
            amount: Amount to charge; a zero amount completes without moving funds

        Returns:
            PaymentResult: Completed, or insufficient funds with the shortfall

        Raises:
            InvalidParametersError: If amount is not a non-negative Decimal
        """
        if not isinstance(amount, Decimal) or not amount.is_finite() or amount < 0:
            raise InvalidParametersError(
                f"Payment amount must be a non-negative Decimal, got {amount!r}"
            )
        return self._charge(amount)

    @abstractmethod
    def _charge(self, amount: Decimal) -> PaymentResult:
        """Perform the variant-specific charge for a validated amount.

        Args:
            amount: Validated non-negative amount to charge

        Returns:
            PaymentResult: Outcome of the charge
        """
        pass

    @abstractmethod
    def payment_details(self) -> str:
        """Return a masked, human-readable summary of this payment method.

        Returns:
            str: Summary that never exposes full card numbers or security codes
        """
        pass

    def _completed(self, amount: Decimal, change: Decimal = Decimal("0")) -> PaymentResult:
        return PaymentResult(
            status=PaymentStatus.COMPLETED,
            payment_type=self.payment_type,
            amount=amount,
            change=change,
            details=self.payment_details(),
        )

    def _insufficient(self, amount: Decimal, missing_amount: Decimal) -> PaymentResult:
        return PaymentResult(
            status=PaymentStatus.INSUFFICIENT_FUNDS,
            payment_type=self.payment_type,
            amount=amount,
            missing_amount=missing_amount,
            details=self.payment_details(),
        )
