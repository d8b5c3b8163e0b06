from typing import Final

DATE_PATTERN: Final[str] = r"^\d{4}-\d{2}-\d{2}$"

# Event names published by the refrigerator
PRODUCT_EXPIRED: Final[str] = "fridge.product_expired"
PRODUCT_DEPLETED: Final[str] = "fridge.product_depleted"

SHOPPING_MODE_LIFETIME: Final[str] = "lifetime"
SHOPPING_MODE_DEFICIT: Final[str] = "deficit"
