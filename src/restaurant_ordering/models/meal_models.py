"""Meal data models.

A meal bundles up to four menu items and scales their combined price by the
meal size.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from restaurant_ordering.models.menu_models import MenuItem


class MealSize(str, Enum):
    """Enumeration of meal sizes."""

    REGULAR = "regular"
    LARGE = "large"
    FAMILY_SIZE = "family_size"

    @property
    def multiplier(self) -> Decimal:
        """Price multiplier applied to the meal's combined component price."""
        return _SIZE_MULTIPLIERS[self]


_SIZE_MULTIPLIERS: dict[MealSize, Decimal] = {
    MealSize.REGULAR: Decimal("1"),
    MealSize.LARGE: Decimal("1.3"),
    MealSize.FAMILY_SIZE: Decimal("2.0"),
}


class Meal(BaseModel):
    """Combo meal model.

    Components are optional and shared by reference; absent components
    contribute nothing to the price.
    """

    model_config = ConfigDict(frozen=True)

    main_item: MenuItem | None = Field(None, description="Main course")
    side_item: MenuItem | None = Field(None, description="Side dish")
    beverage: MenuItem | None = Field(None, description="Drink")
    dessert: MenuItem | None = Field(None, description="Dessert")
    special_instructions: str | None = Field(None, description="Notes for the kitchen")
    size: MealSize | None = Field(default=MealSize.REGULAR, description="Meal size")

    @property
    def labelled_components(self) -> list[tuple[str, MenuItem]]:
        """Present components with their display labels, main to dessert."""
        slots = (
            ("Main", self.main_item),
            ("Side", self.side_item),
            ("Beverage", self.beverage),
            ("Dessert", self.dessert),
        )
        return [(label, item) for label, item in slots if item is not None]

    @property
    def components(self) -> list[str]:
        """Names of the present components, main to dessert."""
        return [item.name for _, item in self.labelled_components]

    def total_price(self) -> Decimal:
        """Calculate the meal price.

        The size multiplier is applied once to the sum of the components.
        An unset size leaves the sum unchanged. No rounding is applied.

        Returns:
            Decimal: Meal price at full precision
        """
        total = sum((item.price for _, item in self.labelled_components), Decimal("0"))
        if self.size is None:
            return total
        return total * self.size.multiplier

    def __str__(self) -> str:
        # Imported here, the renderer depends on this module
        from restaurant_ordering.services.receipt_renderer import render_meal

        return render_meal(self)
