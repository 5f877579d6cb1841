"""Line items and the product factory."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

import structlog

from .catalog import ProductCode, lookup, resolve_code

logger = structlog.get_logger()


@dataclass
class LineItem:
    code: ProductCode
    name: str
    price: Decimal

    def __str__(self) -> str:
        return f"{self.name} ({self.code.value}) {self.price:.2f}"


def parse_price(value: object) -> Decimal | None:
    """Parse a price override, returning None when it is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str, Decimal)):
        return None
    try:
        price = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not price.is_finite():
        return None
    return price


def create_product(code: ProductCode | str, price: object = None) -> LineItem:
    """Create a line item for a catalog product.

    The optional price overrides the catalog default. Overrides that are
    missing or not numeric fall back to the default price.

    Raises:
        UnknownProductError: If the code is not in the catalog.
    """
    product_code = resolve_code(code)
    defaults = lookup(product_code)

    final_price = parse_price(price)
    if final_price is None:
        if price is not None:
            logger.debug("price_override_ignored", code=product_code.value, price=repr(price))
        final_price = defaults.price

    return LineItem(code=product_code, name=defaults.name, price=final_price)
