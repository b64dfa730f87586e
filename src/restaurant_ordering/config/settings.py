"""Restaurant-wide settings.

A single settings instance is shared by the whole process. It is created
lazily on first access and every caller observes the same object, so a rate
changed through update() is visible to orders that were built earlier.
"""

import logging
import threading
from decimal import Decimal
from typing import Any

from pydantic import Field, PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class RestaurantSettings(BaseSettings):
    """Configurable rates and identity strings for the restaurant.

    Every field can be overridden through a RESTAURANT_* environment variable
    or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="RESTAURANT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    restaurant_name: str = Field(default="TMPS Pizza", description="Display name")
    address: str = Field(default="123 Main Street, Downtown", description="Street address")
    phone_number: str = Field(default="+1-555-0123", description="Contact phone number")
    business_hours: str = Field(
        default="Mon-Fri: 11AM-10PM, Sat-Sun: 12PM-11PM", description="Opening hours"
    )
    tax_rate_percent: Decimal = Field(
        default=Decimal("8.5"), description="Sales tax as a percentage", ge=0
    )
    delivery_fee_rate_percent: Decimal = Field(
        default=Decimal("10.0"), description="Delivery fee as a percentage of subtotal", ge=0
    )
    capacity: int = Field(default=50, description="Number of tables", ge=0)
    currency: str = Field(default="USD", description="ISO currency code")

    _lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)

    def update(self, **changes: Any) -> None:
        """Apply one or more setting changes atomically.

        Args:
            **changes: Field names mapped to their new values

        Raises:
            AttributeError: If a name is not a settings field
            pydantic.ValidationError: If a value fails validation
        """
        with self._lock:
            for name in changes:
                if name not in type(self).model_fields:
                    raise AttributeError(f"Unknown setting: {name}")
            for name, value in changes.items():
                setattr(self, name, value)
        logger.info(f"Restaurant settings updated: {', '.join(sorted(changes))}")

    def summary(self) -> str:
        """Render the configuration as a human-readable block."""
        return (
            "Restaurant Configuration:\n"
            f"  Name: {self.restaurant_name}\n"
            f"  Address: {self.address}\n"
            f"  Phone: {self.phone_number}\n"
            f"  Hours: {self.business_hours}\n"
            f"  Tax Rate: {self.tax_rate_percent}%\n"
            f"  Delivery Fee: {self.delivery_fee_rate_percent}%\n"
            f"  Capacity: {self.capacity} tables\n"
            f"  Currency: {self.currency}"
        )


# Process-wide instance, created on first access
_settings: RestaurantSettings | None = None
_settings_lock = threading.Lock()


def get_settings() -> RestaurantSettings:
    """Create or retrieve the shared settings instance.

    Returns:
        The process-wide RestaurantSettings
    """
    global _settings

    if _settings is not None:
        return _settings

    with _settings_lock:
        if _settings is None:
            _settings = RestaurantSettings()
            logger.info(f"Restaurant settings initialized for {_settings.restaurant_name}")
    return _settings


def reset_settings() -> None:
    """Discard the shared settings instance so the next access rebuilds it."""
    global _settings

    with _settings_lock:
        _settings = None
