"""Unit tests for meal models."""

from decimal import Decimal

import pytest

from restaurant_ordering.models.meal_models import Meal, MealSize
from restaurant_ordering.models.menu_models import MenuCategory, MenuItem


@pytest.mark.unit
class TestMealSize:
    """Test suite for MealSize."""

    def test_multipliers(self) -> None:
        """Test the price multiplier of every size."""
        assert MealSize.REGULAR.multiplier == Decimal("1")
        assert MealSize.LARGE.multiplier == Decimal("1.3")
        assert MealSize.FAMILY_SIZE.multiplier == Decimal("2.0")


@pytest.mark.unit
class TestMealPricing:
    """Test suite for Meal.total_price."""

    @pytest.fixture
    def full_components(
        self,
        margherita: MenuItem,
        caesar_salad: MenuItem,
        cappuccino: MenuItem,
        tiramisu: MenuItem,
    ) -> dict[str, MenuItem]:
        """All four meal components."""
        return {
            "main_item": margherita,
            "side_item": caesar_salad,
            "beverage": cappuccino,
            "dessert": tiramisu,
        }

    def test_regular_meal_equals_component_sum(self, full_components: dict) -> None:
        """Test that a regular meal costs exactly the sum of its components."""
        meal = Meal(**full_components, size=MealSize.REGULAR)

        assert meal.total_price() == Decimal("36.96")

    def test_large_meal_scales_sum(self, full_components: dict) -> None:
        """Test that the large multiplier applies to the sum."""
        meal = Meal(**full_components, size=MealSize.LARGE)

        assert meal.total_price() == Decimal("36.96") * Decimal("1.3")
        assert meal.total_price() == Decimal("48.048")

    def test_family_meal_doubles_sum(self, full_components: dict) -> None:
        """Test that the family size doubles the sum."""
        meal = Meal(**full_components, size=MealSize.FAMILY_SIZE)

        assert meal.total_price() == Decimal("73.92")

    def test_unset_size_applies_no_multiplier(self, margherita: MenuItem) -> None:
        """Test that a meal without a size costs the plain sum."""
        meal = Meal(main_item=margherita, size=None)

        assert meal.total_price() == Decimal("12.99")

    def test_absent_components_contribute_nothing(
        self, margherita: MenuItem, cappuccino: MenuItem
    ) -> None:
        """Test pricing with only some components present."""
        meal = Meal(main_item=margherita, beverage=cappuccino, size=MealSize.LARGE)

        assert meal.total_price() == (Decimal("12.99") + Decimal("4.99")) * Decimal("1.3")

    def test_empty_meal_costs_zero(self) -> None:
        """Test that a meal with no components is free."""
        assert Meal().total_price() == Decimal("0")

    @pytest.mark.parametrize("size", list(MealSize))
    def test_total_never_below_component_sum(self, full_components: dict, size: MealSize) -> None:
        """Test that no size discounts the meal."""
        meal = Meal(**full_components, size=size)
        component_sum = sum((item.price for item in full_components.values()), Decimal("0"))

        assert meal.total_price() >= component_sum
        assert (meal.total_price() == component_sum) == (size is MealSize.REGULAR)

    def test_no_intermediate_rounding(self) -> None:
        """Test that fractional cents survive the size multiplier."""
        item = MenuItem(name="Espresso", price=Decimal("3.99"), category=MenuCategory.BEVERAGE)
        meal = Meal(beverage=item, size=MealSize.LARGE)

        assert meal.total_price() == Decimal("5.187")


@pytest.mark.unit
class TestMealComponents:
    """Test suite for Meal component listing and rendering."""

    def test_components_follow_main_side_beverage_dessert_order(
        self,
        margherita: MenuItem,
        caesar_salad: MenuItem,
        cappuccino: MenuItem,
        tiramisu: MenuItem,
    ) -> None:
        """Test the display order of component names."""
        meal = Meal(
            dessert=tiramisu,
            beverage=cappuccino,
            side_item=caesar_salad,
            main_item=margherita,
        )

        assert meal.components == ["Margherita Pizza", "Caesar Salad", "Cappuccino", "Tiramisu"]

    def test_components_skip_absent_items(self, cappuccino: MenuItem) -> None:
        """Test that absent components are not listed."""
        assert Meal(beverage=cappuccino).components == ["Cappuccino"]

    def test_meal_shares_item_references(self, margherita: MenuItem) -> None:
        """Test that a meal does not copy its items."""
        meal = Meal(main_item=margherita)

        assert meal.main_item is margherita

    def test_str_renders_meal_block(self, margherita: MenuItem, cappuccino: MenuItem) -> None:
        """Test the standalone meal rendering."""
        meal = Meal(
            main_item=margherita,
            beverage=cappuccino,
            size=MealSize.LARGE,
            special_instructions="Extra basil",
        )

        assert str(meal) == "\n".join(
            [
                "=== MEAL ===",
                "Size: LARGE",
                "Main: Margherita Pizza ($12.99)",
                "Beverage: Cappuccino ($4.99)",
                "Special Instructions: Extra basil",
                "Total Price: $23.37",
            ]
        )
