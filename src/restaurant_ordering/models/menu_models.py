"""Menu data models.

Menu items are immutable values produced by the menu item factory and shared
by reference between meals and orders.
"""

import logging
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class MenuCategory(str, Enum):
    """Enumeration of menu categories."""

    APPETIZER = "appetizer"
    MAIN_COURSE = "main_course"
    DESSERT = "dessert"
    BEVERAGE = "beverage"


# Preparation steps per category; main courses are the house pizzas
PREPARATION_STEPS: dict[MenuCategory, tuple[str, ...]] = {
    MenuCategory.APPETIZER: ("Plating appetizer",),
    MenuCategory.MAIN_COURSE: (
        "Rolling out dough",
        "Adding toppings",
        "Baking in wood-fired oven",
    ),
    MenuCategory.DESSERT: ("Plating dessert",),
    MenuCategory.BEVERAGE: ("Pouring beverage",),
}


class MenuItem(BaseModel):
    """Menu item model."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Item name", min_length=1)
    description: str = Field(default="", description="Item description")
    price: Decimal = Field(..., description="Item price", ge=0)
    category: MenuCategory = Field(..., description="Menu category")

    def prepare(self) -> list[str]:
        """Run the kitchen preparation for this item.

        Returns:
            list: Preparation steps performed, in order
        """
        steps = list(PREPARATION_STEPS[self.category])
        logger.info(f"Preparing {self.category.value}: {self.name} ({'; '.join(steps)})")
        return steps

    def __str__(self) -> str:
        return f"{self.name} - {self.description} (${self.price:.2f})"
