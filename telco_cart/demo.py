"""Demo: fill a cart with one of the reference scenarios and print the total."""

import argparse

import structlog

from .cart import ShoppingCart
from .catalog import ProductCode
from .logging_config import configure_logging
from .product import create_product
from .rules import PRICE_RULES

logger = structlog.get_logger()

# (product code, promo code) in the order they are added
SCENARIOS = {
    1: [
        (ProductCode.ULT_SMALL, None),
        (ProductCode.ULT_SMALL, None),
        (ProductCode.ULT_SMALL, None),
        (ProductCode.ULT_LARGE, None),
    ],
    2: [
        (ProductCode.ULT_SMALL, None),
        (ProductCode.ULT_SMALL, None),
        (ProductCode.ULT_LARGE, None),
        (ProductCode.ULT_LARGE, None),
        (ProductCode.ULT_LARGE, None),
        (ProductCode.ULT_LARGE, None),
    ],
    3: [
        (ProductCode.ULT_SMALL, None),
        (ProductCode.ULT_MEDIUM, None),
        (ProductCode.ULT_MEDIUM, None),
    ],
    4: [
        (ProductCode.ULT_SMALL, "I<3AMAYSIM"),
        (ProductCode.ONE_GB, None),
    ],
}


def run_scenario(number: int) -> ShoppingCart:
    """Build a cart with the default price rules and add the scenario's items."""
    cart = ShoppingCart(PRICE_RULES)
    for code, promo_code in SCENARIOS[number]:
        cart.add_item(create_product(code), promo_code)
    return cart


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Telco shopping cart pricing demo")
    parser.add_argument("--scenario", type=int, choices=sorted(SCENARIOS), default=1,
                        help="Reference scenario to run (default: 1)")
    parser.add_argument("--items", action="store_true",
                        help="Print the priced line items before the total")
    parser.add_argument("--log-level", default=None,
                        help="Log level (default: $LOG_LEVEL or WARNING)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    logger.info("running_scenario", scenario=args.scenario)

    cart = run_scenario(args.scenario)

    if args.items:
        for item in cart.items:
            print(item)
        print(f"Subtotal: {cart.subtotal:.2f}")
        for promo in cart.applied_promo_codes:
            print(f"Promo: {promo.code} ({promo.discount} {promo.type.value})")

    print(f"{cart.total:.2f}")
    return 0
