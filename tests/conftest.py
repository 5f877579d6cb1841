"""Shared pytest fixtures for cart tests."""

import pytest

from telco_cart import PRICE_RULES, ShoppingCart, configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep structlog output to warnings and above during tests."""
    configure_logging("WARNING")


@pytest.fixture
def cart() -> ShoppingCart:
    """Fresh cart with the default price rules and promo codes."""
    return ShoppingCart(PRICE_RULES)
