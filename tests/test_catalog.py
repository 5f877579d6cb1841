"""Tests for the product and promo code tables."""

from decimal import Decimal

import pytest

from telco_cart.catalog import (
    AVAILABLE_PROMO_CODES,
    PRODUCT_DEFAULTS,
    DiscountType,
    ProductCode,
    PromoCode,
    find_promo_code,
    lookup,
    resolve_code,
)
from telco_cart.errors import InvalidArgumentError, UnknownProductError


class TestProductTable:
    """The product table must match the published prices exactly."""

    @pytest.mark.parametrize(
        "code,name,price",
        [
            (ProductCode.ULT_SMALL, "Unlimited 1GB", Decimal("24.90")),
            (ProductCode.ULT_MEDIUM, "Unlimited 2GB", Decimal("29.90")),
            (ProductCode.ULT_LARGE, "Unlimited 5GB", Decimal("44.90")),
            (ProductCode.ONE_GB, "1 GB Data-pack", Decimal("9.90")),
        ],
    )
    def test_defaults(self, code, name, price) -> None:
        """Each code maps to its published name and price."""
        defaults = lookup(code)
        assert defaults.name == name
        assert defaults.price == price

    def test_every_code_has_defaults(self) -> None:
        """No product code is missing from the table."""
        assert set(PRODUCT_DEFAULTS) == set(ProductCode)

    def test_lookup_by_string_value(self) -> None:
        """Lookup accepts the code's string value."""
        assert lookup("1gb") is PRODUCT_DEFAULTS[ProductCode.ONE_GB]


class TestResolveCode:
    """Tests for resolve_code."""

    def test_enum_member_passes_through(self) -> None:
        """Enum members resolve to themselves."""
        assert resolve_code(ProductCode.ULT_LARGE) is ProductCode.ULT_LARGE

    def test_string_value(self) -> None:
        """String values resolve to their enum member."""
        assert resolve_code("ult_medium") is ProductCode.ULT_MEDIUM

    def test_unknown_code_raises(self) -> None:
        """Unknown codes raise UnknownProductError with the cause attached."""
        with pytest.raises(UnknownProductError) as exc_info:
            resolve_code("ult_huge")
        assert exc_info.value.code == "ult_huge"
        assert isinstance(exc_info.value.cause, ValueError)


class TestPromoCode:
    """Tests for PromoCode entries."""

    def test_default_promo_table(self) -> None:
        """The default table holds the single 10% code."""
        assert len(AVAILABLE_PROMO_CODES) == 1
        promo = AVAILABLE_PROMO_CODES[0]
        assert promo.code == "I<3AMAYSIM"
        assert promo.discount == Decimal("10")
        assert promo.type is DiscountType.PERCENT

    def test_normalises_type_and_discount(self) -> None:
        """String types and int discounts are converted."""
        promo = PromoCode(code="FIVE", discount=5, type="amount")
        assert promo.type is DiscountType.AMOUNT
        assert promo.discount == Decimal("5")

    def test_empty_code_rejected(self) -> None:
        """An entry needs a code."""
        with pytest.raises(InvalidArgumentError, match="requires a code"):
            PromoCode(code="", discount=Decimal("10"))

    def test_unknown_type_rejected(self) -> None:
        """Only known discount types are accepted."""
        with pytest.raises(InvalidArgumentError, match="Unknown discount type"):
            PromoCode(code="X", discount=Decimal("10"), type="bogo")

    def test_negative_discount_rejected(self) -> None:
        """Discounts cannot be negative."""
        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            PromoCode(code="X", discount=Decimal("-1"), type=DiscountType.AMOUNT)

    def test_percentage_over_100_rejected(self) -> None:
        """Percentages stay within 0-100."""
        with pytest.raises(InvalidArgumentError, match="0-100"):
            PromoCode(code="X", discount=Decimal("101"))

    def test_non_numeric_discount_rejected(self) -> None:
        """A discount that is not a number raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="finite number"):
            PromoCode(code="X", discount="abc")

    @pytest.mark.parametrize("discount", [Decimal("NaN"), "inf", float("-inf")])
    def test_non_finite_discount_rejected(self, discount) -> None:
        """NaN and infinite discounts raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="finite number"):
            PromoCode(code="X", discount=discount)


class TestFindPromoCode:
    """Tests for find_promo_code."""

    def test_exact_match(self) -> None:
        """A matching code returns its entry."""
        assert find_promo_code("I<3AMAYSIM", AVAILABLE_PROMO_CODES) is AVAILABLE_PROMO_CODES[0]

    def test_match_is_case_sensitive(self) -> None:
        """Case differences do not match."""
        assert find_promo_code("i<3amaysim", AVAILABLE_PROMO_CODES) is None

    def test_missing_code(self) -> None:
        """None and empty codes never match."""
        assert find_promo_code(None, AVAILABLE_PROMO_CODES) is None
        assert find_promo_code("", AVAILABLE_PROMO_CODES) is None
