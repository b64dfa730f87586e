"""Exception types raised by the ordering domain.

A declined payment is not an error here; it is reported through PaymentResult.
"""


class OrderingError(Exception):
    """Base class for all ordering domain errors."""


class ValidationError(OrderingError):
    """Raised when an order builder is asked to build from incomplete input."""


class UnknownItemError(OrderingError):
    """Raised when the menu catalog has no entry for the requested name."""

    def __init__(self, category: str, item_name: str) -> None:
        """Initialize the error.

        Args:
            category: Category the lookup was made in
            item_name: Name that could not be resolved
        """
        super().__init__(f"Unknown {category} item: {item_name}")
        self.category = category
        self.item_name = item_name


class InvalidParametersError(OrderingError):
    """Raised when a payment is requested with missing or mistyped parameters."""
