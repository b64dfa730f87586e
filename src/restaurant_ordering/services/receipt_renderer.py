"""Text rendering for meals and order receipts.

Prices are carried at full precision everywhere else; this is the only place
they are rounded, to two decimals, half up.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from restaurant_ordering.models.meal_models import Meal

if TYPE_CHECKING:
    from restaurant_ordering.models.order_models import Order

RULE = "-" * 40
DOUBLE_RULE = "=" * 40
CENTS = Decimal("0.01")


def format_money(amount: Decimal) -> str:
    """Format an amount as dollars with two decimals.

    Args:
        amount: Amount at any precision

    Returns:
        str: Amount such as "$14.09"
    """
    return f"${amount.quantize(CENTS, rounding=ROUND_HALF_UP)}"


def _size_label(meal: Meal) -> str | None:
    if meal.size is None:
        return None
    return meal.size.name


def render_meal(meal: Meal) -> str:
    """Render a standalone meal block.

    Lines appear in a fixed order: size, each present component with its unit
    price, special instructions when given, then the meal total.
    """
    lines = ["=== MEAL ==="]
    size = _size_label(meal)
    if size:
        lines.append(f"Size: {size}")
    for label, item in meal.labelled_components:
        lines.append(f"{label}: {item.name} ({format_money(item.price)})")
    if meal.special_instructions:
        lines.append(f"Special Instructions: {meal.special_instructions}")
    lines.append(f"Total Price: {format_money(meal.total_price())}")
    return "\n".join(lines)


def render_receipt(order: "Order") -> str:
    """Render the full receipt for an order.

    Sections: header, restaurant identity, order identity, individual items,
    combo meals with a per-meal breakdown, totals, payment method.

    Args:
        order: Order to render; rates are read from its settings at call time

    Returns:
        str: Multi-line receipt text
    """
    settings = order.settings
    lines = [
        DOUBLE_RULE,
        "ORDER RECEIPT".center(40),
        DOUBLE_RULE,
        f"Restaurant: {settings.restaurant_name}",
        f"Address: {settings.address}",
        f"Phone: {settings.phone_number}",
        RULE,
        f"Order #{order.order_number}",
        f"Customer: {order.customer_name}",
        f"Phone: {order.phone_number}",
    ]
    if order.table_number:
        lines.append(f"Table: {order.table_number}")
    lines.append(f"Order Type: {order.order_type.name}")
    if order.delivery_address:
        lines.append(f"Delivery Address: {order.delivery_address}")
    lines.append(RULE)

    if order.items:
        lines.append("Individual Items:")
        for item in order.items:
            lines.append(f"  - {item.name} ({format_money(item.price)})")

    if order.meals:
        if order.items:
            lines.append("")
        lines.append("Combo Meals:")
        for index, meal in enumerate(order.meals, start=1):
            lines.append(f"  Meal #{index}:")
            for label, item in meal.labelled_components:
                lines.append(f"    {label}: {item.name}")
            size = _size_label(meal)
            if size:
                lines.append(f"    Size: {size}")
            lines.append(f"    Meal Total: {format_money(meal.total_price())}")

    service_fee = order.service_fee()
    lines.extend(
        [
            RULE,
            f"Subtotal: {format_money(order.subtotal())}",
            f"Tax ({settings.tax_rate_percent}%): {format_money(order.tax())}",
        ]
    )
    if service_fee > 0:
        lines.append(
            f"Delivery Fee ({settings.delivery_fee_rate_percent}%): {format_money(service_fee)}"
        )
    lines.extend(
        [
            DOUBLE_RULE,
            f"TOTAL: {format_money(order.total())}",
            DOUBLE_RULE,
        ]
    )
    if order.payment_method is not None:
        lines.append(f"Payment Method: {order.payment_method.payment_type.name}")

    return "\n".join(lines)
