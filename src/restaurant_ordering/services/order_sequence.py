"""Order number sequence.

Order numbers start above 1000, only ever increase and are never reused.
"""

import threading

ORDER_NUMBER_START = 1000


class OrderNumberSequence:
    """Thread-safe monotonically increasing order number generator."""

    def __init__(self, start: int = ORDER_NUMBER_START) -> None:
        """Initialize the sequence.

        Args:
            start: Last number considered issued; the first call returns start + 1
        """
        self._last = start
        self._lock = threading.Lock()

    def next_number(self) -> int:
        """Issue the next order number.

        Returns:
            int: A number strictly greater than every number issued before it
        """
        with self._lock:
            self._last += 1
            return self._last

    @property
    def last_issued(self) -> int:
        return self._last


# Process-wide sequence shared by all order builders
_default_sequence = OrderNumberSequence()


def next_order_number() -> int:
    """Issue the next number from the process-wide sequence."""
    return _default_sequence.next_number()
