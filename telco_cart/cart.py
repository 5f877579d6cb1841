"""Shopping cart: item collection, price rules and promo code discounts."""

from collections.abc import Iterable, Sequence
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal

import structlog

from .catalog import AVAILABLE_PROMO_CODES, DiscountType, PromoCode, find_promo_code
from .errors import InvalidArgumentError, errmsg
from .product import LineItem
from .rules import PriceRule

logger = structlog.get_logger()

CENTS = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    """Round to two decimal places, halves away from zero."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def apply_promo_code(value: Decimal, promo: PromoCode) -> Decimal:
    """Apply a single promo code to a running total."""
    if promo.type == DiscountType.PERCENT:
        return round_money(value - value * promo.discount / 100)
    if promo.type == DiscountType.AMOUNT:
        return round_money(value - min(promo.discount, value))
    raise InvalidArgumentError(f"{errmsg.UNKNOWN_DISCOUNT_TYPE}: {promo.type!r}")


class ShoppingCart:
    """Cart that reprices itself every time an item is added.

    Price rules always run against fresh copies of the items the caller
    added, so recomputing without adding anything gives the same result.

    Example::

        cart = ShoppingCart(PRICE_RULES)
        cart.add_item(create_product(ProductCode.ULT_SMALL), "I<3AMAYSIM")
        cart.total  # Decimal("22.41")
    """

    def __init__(
        self,
        price_rules: Iterable[PriceRule],
        available_promo_codes: Sequence[PromoCode] = AVAILABLE_PROMO_CODES,
    ) -> None:
        rules = tuple(price_rules)
        for rule in rules:
            if not callable(rule):
                raise InvalidArgumentError(f"{errmsg.PRICE_RULE_NOT_CALLABLE}: {rule!r}")

        self.price_rules: tuple[PriceRule, ...] = rules
        self.available_promo_codes: tuple[PromoCode, ...] = tuple(available_promo_codes)
        self._added: list[LineItem] = []
        self._items: list[LineItem] = []
        self._applied_promo_codes: list[PromoCode] = []
        self._subtotal = Decimal("0.00")
        self._total = Decimal("0.00")
        self.log = logger.bind(component="shopping_cart")

    @property
    def total(self) -> Decimal:
        return self._total

    @property
    def subtotal(self) -> Decimal:
        """Sum of item prices after price rules, before promo codes."""
        return self._subtotal

    @property
    def items(self) -> tuple[LineItem, ...]:
        """Items as priced by the last recomputation."""
        return tuple(self._items)

    @property
    def added_items(self) -> tuple[LineItem, ...]:
        return tuple(self._added)

    @property
    def applied_promo_codes(self) -> tuple[PromoCode, ...]:
        return tuple(self._applied_promo_codes)

    def add_item(self, product: LineItem, promo_code: str | None = None) -> Decimal:
        """Add a product and recompute the total.

        A promo code is applied when it exactly matches one of the
        available codes. The same code given again is applied again.
        Unknown codes are ignored.
        """
        self._added.append(product)
        self.log.debug("adding_item", code=product.code.value, price=str(product.price))

        if promo_code is not None:
            promo = find_promo_code(promo_code, self.available_promo_codes)
            if promo is not None:
                self._applied_promo_codes.append(promo)
                self.log.debug("promo_code_applied", promo_code=promo.code)
            else:
                self.log.debug("promo_code_ignored", promo_code=promo_code)

        return self.compute_total()

    def compute_total(self) -> Decimal:
        """Run price rules, sum the items and apply promo codes."""
        items = [replace(item) for item in self._added]
        for rule in self.price_rules:
            items = list(rule(items))

        subtotal = round_money(sum((item.price for item in items), Decimal("0")))

        total = subtotal
        for promo in self._applied_promo_codes:
            total = apply_promo_code(total, promo)

        self._items = items
        self._subtotal = subtotal
        self._total = total

        self.log.debug(
            "total_computed",
            item_count=len(items),
            subtotal=str(subtotal),
            total=str(total),
        )
        return total
