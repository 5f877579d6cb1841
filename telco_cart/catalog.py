"""Fixed product and promo code tables.

Product codes are referenced both when items are created and by the
pricing rules. Promo codes are matched by exact string comparison.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import NamedTuple

from .errors import InvalidArgumentError, UnknownProductError, errmsg


class ProductCode(str, Enum):
    ULT_SMALL = "ult_small"
    ULT_MEDIUM = "ult_medium"
    ULT_LARGE = "ult_large"
    ONE_GB = "1gb"


class DiscountType(str, Enum):
    PERCENT = "percent"
    AMOUNT = "amount"


class ProductDefaults(NamedTuple):
    name: str
    price: Decimal


PRODUCT_DEFAULTS = {
    ProductCode.ULT_SMALL: ProductDefaults("Unlimited 1GB", Decimal("24.90")),
    ProductCode.ULT_MEDIUM: ProductDefaults("Unlimited 2GB", Decimal("29.90")),
    ProductCode.ULT_LARGE: ProductDefaults("Unlimited 5GB", Decimal("44.90")),
    ProductCode.ONE_GB: ProductDefaults("1 GB Data-pack", Decimal("9.90")),
}


@dataclass(frozen=True)
class PromoCode:
    code: str
    discount: Decimal
    type: DiscountType = DiscountType.PERCENT

    def __post_init__(self) -> None:
        if not self.code:
            raise InvalidArgumentError(errmsg.PROMO_CODE_REQUIRED)
        try:
            discount_type = DiscountType(self.type)
        except ValueError:
            raise InvalidArgumentError(f"{errmsg.UNKNOWN_DISCOUNT_TYPE}: {self.type!r}") from None
        try:
            discount = Decimal(str(self.discount).strip())
        except InvalidOperation:
            raise InvalidArgumentError(f"{errmsg.DISCOUNT_NOT_NUMERIC}: {self.discount!r}") from None
        if not discount.is_finite():
            raise InvalidArgumentError(f"{errmsg.DISCOUNT_NOT_NUMERIC}: {self.discount!r}")
        if discount < 0:
            raise InvalidArgumentError(errmsg.DISCOUNT_NEGATIVE)
        if discount_type == DiscountType.PERCENT and discount > 100:
            raise InvalidArgumentError(errmsg.PERCENTAGE_RANGE)

        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "type", discount_type)
        object.__setattr__(self, "discount", discount)


AVAILABLE_PROMO_CODES = (
    PromoCode(code="I<3AMAYSIM", discount=Decimal("10"), type=DiscountType.PERCENT),
)


def resolve_code(code: ProductCode | str) -> ProductCode:
    """Return the catalog code for an enum member or its string value."""
    try:
        return ProductCode(code)
    except ValueError as e:
        raise UnknownProductError(code, e) from e


def lookup(code: ProductCode | str) -> ProductDefaults:
    """Get the default name and price for a product code."""
    return PRODUCT_DEFAULTS[resolve_code(code)]


def find_promo_code(code: str | None, available: Sequence[PromoCode]) -> PromoCode | None:
    """Find an available promo code by exact match, or None."""
    if not code:
        return None
    for promo in available:
        if promo.code == code:
            return promo
    return None
