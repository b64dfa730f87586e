"""Fluent builder for orders.

The builder is the only way orders are meant to be created: it validates the
collected fields, snapshots the item and meal lists and assigns the next
order number.
"""

import logging
from collections.abc import Callable, Iterable

from restaurant_ordering.config.settings import RestaurantSettings
from restaurant_ordering.errors import ValidationError
from restaurant_ordering.models.meal_models import Meal
from restaurant_ordering.models.menu_models import MenuItem
from restaurant_ordering.models.order_models import Order, OrderType
from restaurant_ordering.observability import metrics
from restaurant_ordering.observability.decorators import traced
from restaurant_ordering.payments.base_payment import PaymentMethod
from restaurant_ordering.services.order_sequence import next_order_number

logger = logging.getLogger(__name__)


class OrderBuilder:
    """Collects order details step by step and produces a validated Order.

    Args:
        settings: Settings the built orders are priced against. When omitted,
            orders read the process-wide settings.
        number_source: Callable issuing order numbers. Defaults to the
            process-wide sequence.
    """

    def __init__(
        self,
        settings: RestaurantSettings | None = None,
        number_source: Callable[[], int] = next_order_number,
    ) -> None:
        self._settings = settings
        self._number_source = number_source
        self.reset()

    def set_customer_name(self, customer_name: str) -> "OrderBuilder":
        self.customer_name = customer_name
        return self

    def set_phone_number(self, phone_number: str) -> "OrderBuilder":
        self.phone_number = phone_number
        return self

    def set_table_number(self, table_number: str) -> "OrderBuilder":
        self.table_number = table_number
        return self

    def add_item(self, item: MenuItem) -> "OrderBuilder":
        self.items.append(item)
        return self

    def add_items(self, items: Iterable[MenuItem]) -> "OrderBuilder":
        self.items.extend(items)
        return self

    def add_meal(self, meal: Meal) -> "OrderBuilder":
        self.meals.append(meal)
        return self

    def add_meals(self, meals: Iterable[Meal]) -> "OrderBuilder":
        self.meals.extend(meals)
        return self

    def set_order_type(self, order_type: OrderType) -> "OrderBuilder":
        self.order_type = order_type
        return self

    def set_delivery_address(self, delivery_address: str) -> "OrderBuilder":
        self.delivery_address = delivery_address
        return self

    def set_payment_method(self, payment_method: PaymentMethod) -> "OrderBuilder":
        self.payment_method = payment_method
        return self

    def validate(self) -> None:
        """Check the collected fields, in a fixed order.

        Raises:
            ValidationError: On the first missing requirement
        """
        if not self.customer_name:
            raise ValidationError("customer name required")
        if not self.phone_number:
            raise ValidationError("phone number required")
        if not self.items and not self.meals:
            raise ValidationError("must contain at least one item or meal")
        if self.order_type is OrderType.DELIVERY and not self.delivery_address:
            raise ValidationError("delivery address required")
        if self.order_type is OrderType.DINE_IN and not self.table_number:
            raise ValidationError("table number required")

    @traced("order.build")
    def build(self) -> Order:
        """Validate the collected fields and create the order.

        Returns:
            Order: New order with its own copies of the item and meal lists

        Raises:
            ValidationError: If a required field is missing
        """
        try:
            self.validate()
        except ValidationError as e:
            logger.warning(f"Order rejected: {e}")
            raise

        order = Order(
            settings=self._settings,
            order_number=self._number_source(),
            customer_name=self.customer_name,
            phone_number=self.phone_number,
            table_number=self.table_number,
            items=tuple(self.items),
            meals=tuple(self.meals),
            order_type=self.order_type,
            delivery_address=self.delivery_address,
            payment_method=self.payment_method,
        )

        metrics.record_order_built(order.order_type.value)
        logger.info(
            f"Built {order.order_type.value} order #{order.order_number} "
            f"with {len(order.items)} items and {len(order.meals)} meals"
        )
        return order

    def reset(self) -> "OrderBuilder":
        """Restore every field to its default so the builder can be reused."""
        self.customer_name: str | None = None
        self.phone_number: str | None = None
        self.table_number: str | None = None
        self.items: list[MenuItem] = []
        self.meals: list[Meal] = []
        self.order_type: OrderType = OrderType.DINE_IN
        self.delivery_address: str | None = None
        self.payment_method: PaymentMethod | None = None
        return self

    @classmethod
    def dine_in_order(
        cls,
        customer_name: str,
        phone_number: str,
        table_number: str,
        *,
        settings: RestaurantSettings | None = None,
        number_source: Callable[[], int] = next_order_number,
    ) -> "OrderBuilder":
        """Start a dine-in order for a seated customer."""
        return (
            cls(settings, number_source)
            .set_customer_name(customer_name)
            .set_phone_number(phone_number)
            .set_table_number(table_number)
            .set_order_type(OrderType.DINE_IN)
        )

    @classmethod
    def takeout_order(
        cls,
        customer_name: str,
        phone_number: str,
        *,
        settings: RestaurantSettings | None = None,
        number_source: Callable[[], int] = next_order_number,
    ) -> "OrderBuilder":
        """Start a takeout order."""
        return (
            cls(settings, number_source)
            .set_customer_name(customer_name)
            .set_phone_number(phone_number)
            .set_order_type(OrderType.TAKEOUT)
        )

    @classmethod
    def delivery_order(
        cls,
        customer_name: str,
        phone_number: str,
        delivery_address: str,
        *,
        settings: RestaurantSettings | None = None,
        number_source: Callable[[], int] = next_order_number,
    ) -> "OrderBuilder":
        """Start a delivery order."""
        return (
            cls(settings, number_source)
            .set_customer_name(customer_name)
            .set_phone_number(phone_number)
            .set_delivery_address(delivery_address)
            .set_order_type(OrderType.DELIVERY)
        )
