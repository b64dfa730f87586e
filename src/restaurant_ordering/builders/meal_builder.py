"""Fluent builder for combo meals."""

from restaurant_ordering.models.meal_models import Meal, MealSize
from restaurant_ordering.models.menu_models import MenuItem


class MealBuilder:
    """Collects meal components step by step and produces a Meal.

    Any component may be left out; an empty meal is valid and prices at zero.
    """

    def __init__(self) -> None:
        self.reset()

    def set_main_item(self, item: MenuItem) -> "MealBuilder":
        self.main_item = item
        return self

    def set_side_item(self, item: MenuItem) -> "MealBuilder":
        self.side_item = item
        return self

    def set_beverage(self, item: MenuItem) -> "MealBuilder":
        self.beverage = item
        return self

    def set_dessert(self, item: MenuItem) -> "MealBuilder":
        self.dessert = item
        return self

    def set_special_instructions(self, instructions: str) -> "MealBuilder":
        self.special_instructions = instructions
        return self

    def set_meal_size(self, size: MealSize) -> "MealBuilder":
        self.size = size
        return self

    def build(self) -> Meal:
        """Create the meal from the collected components."""
        return Meal(
            main_item=self.main_item,
            side_item=self.side_item,
            beverage=self.beverage,
            dessert=self.dessert,
            special_instructions=self.special_instructions,
            size=self.size,
        )

    def reset(self) -> "MealBuilder":
        """Clear all components and restore the regular size."""
        self.main_item: MenuItem | None = None
        self.side_item: MenuItem | None = None
        self.beverage: MenuItem | None = None
        self.dessert: MenuItem | None = None
        self.special_instructions: str | None = None
        self.size: MealSize | None = MealSize.REGULAR
        return self
