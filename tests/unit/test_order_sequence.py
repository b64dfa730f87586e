"""Unit tests for the order number sequence."""

import threading

import pytest

from restaurant_ordering.services.order_sequence import (
    OrderNumberSequence,
    next_order_number,
)


@pytest.mark.unit
class TestOrderNumberSequence:
    """Test suite for OrderNumberSequence."""

    def test_first_number_is_1001(self) -> None:
        """Test that numbering starts above 1000."""
        assert OrderNumberSequence().next_number() == 1001

    def test_numbers_increase_by_one(self) -> None:
        """Test consecutive numbers."""
        sequence = OrderNumberSequence()

        assert [sequence.next_number() for _ in range(3)] == [1001, 1002, 1003]
        assert sequence.last_issued == 1003

    def test_concurrent_numbers_are_unique(self) -> None:
        """Test that threads never receive the same number."""
        sequence = OrderNumberSequence()
        issued: list[int] = []
        lock = threading.Lock()

        def worker() -> None:
            for _ in range(200):
                number = sequence.next_number()
                with lock:
                    issued.append(number)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(issued) == len(set(issued)) == 1600
        assert max(issued) == 2600

    def test_shared_sequence_is_monotonic(self) -> None:
        """Test the process-wide sequence."""
        first = next_order_number()
        second = next_order_number()

        assert first > 1000
        assert second > first
