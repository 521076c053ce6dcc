# backend/modules/orders/config/order_config.py

from pydantic_settings import BaseSettings
from typing import List


class OrderConfig(BaseSettings):
    """
    Configuration for order pricing and listing.

    Values can be overridden with ORDER_-prefixed environment variables.
    """

    # Discount granted per coffee cup of a served discount order
    DISCOUNT_PER_CUP: int = 100

    # Item types whose line items never count as coffee cups.
    # Comma separated in the environment: ORDER_NON_DISCOUNTABLE_ITEM_TYPES=milk,others
    NON_DISCOUNTABLE_ITEM_TYPES: str = "milk,others"

    # Pagination for order listings
    DEFAULT_PAGE_SIZE: int = 50
    MAX_PAGE_SIZE: int = 500

    class Config:
        env_prefix = "ORDER_"
        case_sensitive = False

    @property
    def non_discountable_item_types(self) -> List[str]:
        return [
            name.strip()
            for name in self.NON_DISCOUNTABLE_ITEM_TYPES.split(",")
            if name.strip()
        ]


# Global instance
order_config = OrderConfig()


def get_order_config() -> OrderConfig:
    """Get the order configuration."""
    return order_config
