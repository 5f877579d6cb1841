"""Telco shopping cart pricing engine."""

from .errors import (
    CartError,
    UnknownProductError,
    InvalidArgumentError,
    errmsg,
)
from .catalog import (
    ProductCode,
    DiscountType,
    PromoCode,
    ProductDefaults,
    PRODUCT_DEFAULTS,
    AVAILABLE_PROMO_CODES,
    find_promo_code,
    lookup,
    resolve_code,
)
from .product import LineItem, create_product, parse_price
from .rules import (
    PriceRule,
    PRICE_RULES,
    three_for_two_small,
    bulk_discount_large,
    bundle_data_pack_with_medium,
)
from .cart import ShoppingCart, apply_promo_code, round_money
from .logging_config import configure_logging, get_log_level

__all__ = [
    # Errors
    "CartError",
    "UnknownProductError",
    "InvalidArgumentError",
    "errmsg",
    # Catalog
    "ProductCode",
    "DiscountType",
    "PromoCode",
    "ProductDefaults",
    "PRODUCT_DEFAULTS",
    "AVAILABLE_PROMO_CODES",
    "find_promo_code",
    "lookup",
    "resolve_code",
    # Products
    "LineItem",
    "create_product",
    "parse_price",
    # Rules
    "PriceRule",
    "PRICE_RULES",
    "three_for_two_small",
    "bulk_discount_large",
    "bundle_data_pack_with_medium",
    # Cart
    "ShoppingCart",
    "apply_promo_code",
    "round_money",
    # Logging
    "configure_logging",
    "get_log_level",
]
