"""Custom metrics for the ordering domain."""

from decimal import Decimal

from opentelemetry import metrics

meter = metrics.get_meter("restaurant-ordering")

orders_built_counter = meter.create_counter(
    name="orders_built_total",
    description="Total number of orders built by order type",
    unit="1",
)

payment_completed_counter = meter.create_counter(
    name="payments_completed_total",
    description="Total number of completed payments by payment type",
    unit="1",
)

payment_declined_counter = meter.create_counter(
    name="payments_declined_total",
    description="Total number of payments declined for insufficient funds",
    unit="1",
)

order_total_histogram = meter.create_histogram(
    name="order_total_amount",
    description="Order totals charged at payment time",
    unit="{currency}",
)


def record_order_built(order_type: str) -> None:
    """Record a successfully built order.

    Args:
        order_type: The order type (e.g., "dine_in", "delivery")
    """
    orders_built_counter.add(1, {"order_type": order_type})


def record_payment_completed(payment_type: str, amount: Decimal) -> None:
    """Record a completed payment.

    Args:
        payment_type: The payment method kind that was charged
        amount: Amount charged
    """
    payment_completed_counter.add(1, {"payment_type": payment_type})
    order_total_histogram.record(float(amount), {"payment_type": payment_type})


def record_payment_declined(payment_type: str) -> None:
    """Record a payment declined for insufficient funds.

    Args:
        payment_type: The payment method kind that was declined
    """
    payment_declined_counter.add(1, {"payment_type": payment_type})
