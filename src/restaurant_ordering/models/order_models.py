"""Order data models.

An Order is created once by the order builder and is read-only afterwards.
Pricing is recomputed from the current components and the current settings
rates on every call, so a rate change after the order was built is reflected
in its total.
"""

import logging
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from restaurant_ordering.config.settings import RestaurantSettings, get_settings
from restaurant_ordering.models.meal_models import Meal
from restaurant_ordering.models.menu_models import MenuItem
from restaurant_ordering.observability import metrics
from restaurant_ordering.observability.decorators import traced
from restaurant_ordering.payments.base_payment import PaymentMethod, PaymentResult
from restaurant_ordering.services.order_sequence import ORDER_NUMBER_START
from restaurant_ordering.services.receipt_renderer import render_receipt

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


class OrderType(str, Enum):
    """Enumeration of order fulfilment types."""

    DINE_IN = "dine_in"
    TAKEOUT = "takeout"
    DELIVERY = "delivery"


class Order(BaseModel):
    """Customer order aggregate.

    Holds the ordered items and meals, who ordered them, how the order is
    fulfilled and how it will be paid for.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    order_number: int = Field(..., description="Unique order number", gt=ORDER_NUMBER_START)
    customer_name: str = Field(..., description="Customer name", min_length=1)
    phone_number: str = Field(..., description="Customer phone number", min_length=1)
    table_number: str | None = Field(None, description="Table for dine-in orders")
    items: tuple[MenuItem, ...] = Field(default=(), description="Individual items in order added")
    meals: tuple[Meal, ...] = Field(default=(), description="Combo meals in order added")
    order_type: OrderType = Field(default=OrderType.DINE_IN, description="Fulfilment type")
    delivery_address: str | None = Field(None, description="Address for delivery orders")
    payment_method: PaymentMethod | None = Field(None, description="How the order is paid")

    _settings: RestaurantSettings | None = PrivateAttr(default=None)

    def __init__(self, settings: RestaurantSettings | None = None, **data: Any) -> None:
        """Initialize the order.

        Args:
            settings: Settings to price against; the shared instance when omitted
            **data: Order fields
        """
        super().__init__(**data)
        self._settings = settings

    @property
    def settings(self) -> RestaurantSettings:
        """Settings this order is priced against."""
        return self._settings if self._settings is not None else get_settings()

    def subtotal(self) -> Decimal:
        """Sum of item prices and meal prices."""
        items_total = sum((item.price for item in self.items), Decimal("0"))
        meals_total = sum((meal.total_price() for meal in self.meals), Decimal("0"))
        return items_total + meals_total

    def tax(self) -> Decimal:
        """Tax on the subtotal at the current tax rate."""
        return self.subtotal() * (self.settings.tax_rate_percent / HUNDRED)

    def service_fee(self) -> Decimal:
        """Delivery fee on the subtotal; zero unless the order is a delivery."""
        if self.order_type is not OrderType.DELIVERY:
            return Decimal("0")
        return self.subtotal() * (self.settings.delivery_fee_rate_percent / HUNDRED)

    def total(self) -> Decimal:
        """Subtotal plus tax plus service fee, unrounded."""
        return self.subtotal() + self.tax() + self.service_fee()

    @traced("order.process_payment")
    def process_payment(self) -> PaymentResult | None:
        """Charge the order total to the order's payment method.

        Returns:
            PaymentResult: Outcome of the charge, or None if the order has no
            payment method
        """
        if self.payment_method is None:
            logger.warning(f"Order #{self.order_number} has no payment method, skipping payment")
            return None

        amount = self.total()
        result = self.payment_method.execute(amount)
        payment_type = result.payment_type.value

        if result.success:
            metrics.record_payment_completed(payment_type, amount)
            logger.info(f"Order #{self.order_number} paid by {payment_type}")
        else:
            metrics.record_payment_declined(payment_type)
            logger.warning(
                f"Payment for order #{self.order_number} declined: "
                f"{result.missing_amount:.2f} short"
            )
        return result

    def render_receipt(self) -> str:
        """Render the printable receipt for this order."""
        return render_receipt(self)

    def __str__(self) -> str:
        return self.render_receipt()
