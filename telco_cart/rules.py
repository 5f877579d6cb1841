"""Pricing rules.

Every rule has the same signature::

    rule(items: list[LineItem]) -> list[LineItem]

A rule receives the cart's items as they stand after the previous rule and
returns the adjusted list. Rules never mutate their input; repriced items
are copies and appended items are new.

The cart applies ``PRICE_RULES`` in order on every recomputation.
"""

from dataclasses import replace
from decimal import Decimal
from typing import Callable

from .catalog import ProductCode
from .product import LineItem, create_product

PriceRule = Callable[[list[LineItem]], list[LineItem]]

BULK_LARGE_THRESHOLD = 3
BULK_LARGE_PRICE = Decimal("39.90")
BUNDLE_SIZE_SMALL = 3


def three_for_two_small(items: list[LineItem]) -> list[LineItem]:
    """Every third Unlimited 1GB in cart order is free."""
    counter = 0
    result = []
    for item in items:
        if item.code == ProductCode.ULT_SMALL:
            counter += 1
            if counter == BUNDLE_SIZE_SMALL:
                item = replace(item, price=Decimal("0"))
                counter = 0
        result.append(item)
    return result


def bulk_discount_large(items: list[LineItem]) -> list[LineItem]:
    """Exactly three Unlimited 5GB drop each one's price to 39.90.

    Any other count leaves the prices alone; larger multiples do not
    qualify.
    """
    count = 0
    for item in items:
        if item.code == ProductCode.ULT_LARGE:
            count += 1
            if count > BULK_LARGE_THRESHOLD:
                break

    if count != BULK_LARGE_THRESHOLD:
        return list(items)

    return [
        replace(item, price=BULK_LARGE_PRICE) if item.code == ProductCode.ULT_LARGE else item
        for item in items
    ]


def bundle_data_pack_with_medium(items: list[LineItem]) -> list[LineItem]:
    """Each Unlimited 2GB comes with a free 1 GB Data-pack."""
    count = sum(1 for item in items if item.code == ProductCode.ULT_MEDIUM)
    free_packs = [create_product(ProductCode.ONE_GB, 0) for _ in range(count)]
    return list(items) + free_packs


PRICE_RULES: list[PriceRule] = [
    three_for_two_small,
    bulk_discount_large,
    bundle_data_pack_with_medium,
]
