"""Error types and message constants for the cart pricing engine."""

from typing import Optional


class errmsg:
    """Error message constants for the cart domain."""

    UNKNOWN_PRODUCT = "Unknown product code"
    PRICE_RULE_NOT_CALLABLE = "Price rule must be callable"
    PROMO_CODE_REQUIRED = "Promo code entry requires a code"
    UNKNOWN_DISCOUNT_TYPE = "Unknown discount type"
    PERCENTAGE_RANGE = "Percentage must be 0-100"
    DISCOUNT_NEGATIVE = "Discount cannot be negative"
    DISCOUNT_NOT_NUMERIC = "Discount must be a finite number"


class CartError(Exception):
    """Base class for cart errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class UnknownProductError(CartError, LookupError):
    """Product code is not present in the catalog."""

    def __init__(self, code: object, cause: Optional[Exception] = None):
        super().__init__(f"{errmsg.UNKNOWN_PRODUCT}: {code!r}", cause)
        self.code = code


class InvalidArgumentError(CartError):
    """Invalid argument provided by caller."""

    def __init__(self, message: str):
        super().__init__(f"invalid argument: {message}")
