"""Shared pytest fixtures and configuration for all tests."""

from collections.abc import Iterator
from decimal import Decimal

import pytest

from restaurant_ordering.config.settings import RestaurantSettings, reset_settings
from restaurant_ordering.models.menu_models import MenuCategory, MenuItem


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Drop the shared settings instance around every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings() -> RestaurantSettings:
    """Fixture providing settings with the default rates (8.5% tax, 10% delivery)."""
    return RestaurantSettings(
        _env_file=None,
        tax_rate_percent=Decimal("8.5"),
        delivery_fee_rate_percent=Decimal("10.0"),
    )


@pytest.fixture
def margherita() -> MenuItem:
    """Fixture providing the Margherita pizza."""
    return MenuItem(
        name="Margherita Pizza",
        description="Tomato sauce, mozzarella, fresh basil",
        price=Decimal("12.99"),
        category=MenuCategory.MAIN_COURSE,
    )


@pytest.fixture
def caesar_salad() -> MenuItem:
    """Fixture providing the Caesar salad appetizer."""
    return MenuItem(
        name="Caesar Salad",
        description="Romaine lettuce, parmesan, croutons, Caesar dressing",
        price=Decimal("10.99"),
        category=MenuCategory.APPETIZER,
    )


@pytest.fixture
def cappuccino() -> MenuItem:
    """Fixture providing the cappuccino beverage."""
    return MenuItem(
        name="Cappuccino",
        description="Espresso with steamed milk and foam",
        price=Decimal("4.99"),
        category=MenuCategory.BEVERAGE,
    )


@pytest.fixture
def tiramisu() -> MenuItem:
    """Fixture providing the tiramisu dessert."""
    return MenuItem(
        name="Tiramisu",
        description="Classic Italian coffee-flavored dessert",
        price=Decimal("7.99"),
        category=MenuCategory.DESSERT,
    )
