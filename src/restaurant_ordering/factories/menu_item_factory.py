"""Menu item factory.

Resolves a category and a customer-facing name (or common alias) to the
catalog entry for that item. The catalog is static.
"""

import logging
from decimal import Decimal

from restaurant_ordering.errors import UnknownItemError
from restaurant_ordering.models.menu_models import MenuCategory, MenuItem

logger = logging.getLogger(__name__)

# (name, description, price, aliases) per category, in menu order
CATALOG: dict[MenuCategory, tuple[tuple[str, str, str, tuple[str, ...]], ...]] = {
    MenuCategory.APPETIZER: (
        ("Bruschetta", "Toasted bread with tomatoes, garlic, basil", "8.99", ()),
        ("Mozzarella Sticks", "Fried mozzarella with marinara sauce", "9.99", ()),
        (
            "Caesar Salad",
            "Romaine lettuce, parmesan, croutons, Caesar dressing",
            "10.99",
            (),
        ),
    ),
    MenuCategory.MAIN_COURSE: (
        ("Margherita Pizza", "Tomato sauce, mozzarella, fresh basil", "12.99", ("margherita",)),
        ("Pepperoni Pizza", "Tomato sauce, mozzarella, pepperoni", "14.99", ("pepperoni",)),
        (
            "Quattro Formaggi Pizza",
            "Tomato sauce, mozzarella, gorgonzola, parmesan, ricotta",
            "15.99",
            ("quattro formaggi", "four cheese"),
        ),
        (
            "Capricciosa Pizza",
            "Tomato sauce, mozzarella, ham, black olives",
            "16.99",
            ("capricciosa",),
        ),
    ),
    MenuCategory.DESSERT: (
        ("Tiramisu", "Classic Italian coffee-flavored dessert", "7.99", ()),
        ("Panna Cotta", "Italian cream dessert with berry sauce", "6.99", ()),
        (
            "Chocolate Lava Cake",
            "Warm chocolate cake with vanilla ice cream",
            "8.99",
            ("lava cake",),
        ),
    ),
    MenuCategory.BEVERAGE: (
        ("Espresso", "Strong Italian coffee", "3.99", ()),
        ("Cappuccino", "Espresso with steamed milk and foam", "4.99", ()),
        ("Coca-Cola", "Soft drink", "2.99", ("coke",)),
        ("Sprite", "Soft drink", "2.99", ()),
        ("Mineral Water", "Still or sparkling", "1.99", ("water",)),
    ),
}


def _build_index() -> dict[MenuCategory, dict[str, MenuItem]]:
    index: dict[MenuCategory, dict[str, MenuItem]] = {}
    for category, entries in CATALOG.items():
        lookup: dict[str, MenuItem] = {}
        for name, description, price, aliases in entries:
            item = MenuItem(
                name=name,
                description=description,
                price=Decimal(price),
                category=category,
            )
            for key in (name, *aliases):
                lookup[key.lower()] = item
        index[category] = lookup
    return index


class MenuItemFactory:
    """Factory for catalog menu items.

    Items are immutable, so the same instance is handed out for every request
    of a given entry.
    """

    _index: dict[MenuCategory, dict[str, MenuItem]] = _build_index()

    @classmethod
    def create_menu_item(cls, category: MenuCategory, item_name: str) -> MenuItem:
        """Look up a menu item by category and name.

        Args:
            category: Menu category to search
            item_name: Item name or alias, case-insensitive

        Returns:
            MenuItem: The catalog entry

        Raises:
            UnknownItemError: If the category has no item with that name
        """
        item = cls._index.get(category, {}).get(item_name.strip().lower())
        if item is None:
            logger.warning(f"Unknown {category.value} requested: {item_name}")
            raise UnknownItemError(category.value, item_name)
        return item

    @classmethod
    def available_items(cls, category: MenuCategory) -> list[MenuItem]:
        """List the catalog entries of a category in menu order."""
        return [
            cls.create_menu_item(category, name) for name, _, _, _ in CATALOG.get(category, ())
        ]
