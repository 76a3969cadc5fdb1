"""
Discount rules. Each rule targets one item type: it counts that item in the cart,
decides eligibility and registers one absolute discount.

DiscountRule is a closed union; Checkout only ever calls apply(cart).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Protocol, Union

from adcheckout.checkout.domain import ZERO, Item, Money, to_decimal
from adcheckout.domain import InvalidRuleError, ValueObject

logger = logging.getLogger(__name__)


class DiscountTarget(Protocol):
    """What a rule needs from a cart."""

    def count(self, item_id: Optional[str] = None) -> int:
        ...

    def apply_absolute_discount(self, amount: Money) -> None:
        ...


def bundles_in(quantity: int, bundle_size: int) -> int:
    """Number of complete bundles in quantity units."""
    return quantity // bundle_size


def price_difference(standard_price: Decimal, discounted_price: Decimal) -> Decimal:
    """Per-unit saving; 0 when the discounted price is not lower than the standard one."""
    if standard_price < discounted_price:
        return ZERO
    return standard_price - discounted_price


def _discounted_price(value: Money) -> Decimal:
    price = to_decimal(value)
    if price < 0:
        raise InvalidRuleError(f"discounted_price must not be negative, got {price}")
    return price


@dataclass(frozen=True)
class BundleDiscount(ValueObject):
    """Pay for paid_units_per_bundle out of every bundle_size units (e.g. 3 for 2)."""
    item: Item
    bundle_size: int
    paid_units_per_bundle: int

    def __post_init__(self) -> None:
        if self.bundle_size < 1:
            raise InvalidRuleError(f"bundle_size must be at least 1, got {self.bundle_size}")
        if not 0 <= self.paid_units_per_bundle <= self.bundle_size:
            raise InvalidRuleError(
                f"paid_units_per_bundle must be between 0 and {self.bundle_size}, "
                f"got {self.paid_units_per_bundle}"
            )

    def apply(self, cart: DiscountTarget) -> None:
        quantity = cart.count(self.item.id)
        if quantity < 1:
            return
        bundles = bundles_in(quantity, self.bundle_size)
        if bundles > 0:
            discount = self.item.price * bundles * (self.bundle_size - self.paid_units_per_bundle)
            logger.debug("%s: %d bundle(s) of %s, discount %s", type(self).__name__, bundles, self.item.id, discount)
            cart.apply_absolute_discount(discount)


@dataclass(frozen=True)
class FlatPriceOverride(ValueObject):
    """Every unit of the item is charged at discounted_price."""
    item: Item
    discounted_price: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "discounted_price", _discounted_price(self.discounted_price))

    def apply(self, cart: DiscountTarget) -> None:
        quantity = cart.count(self.item.id)
        if quantity < 1:
            return
        discount = price_difference(self.item.price, self.discounted_price) * quantity
        logger.debug("%s: %d x %s, discount %s", type(self).__name__, quantity, self.item.id, discount)
        cart.apply_absolute_discount(discount)


@dataclass(frozen=True)
class ThresholdPriceOverride(ValueObject):
    """Once at least threshold units are bought, all of them are charged at discounted_price."""
    item: Item
    threshold: int
    discounted_price: Decimal

    def __post_init__(self) -> None:
        if self.threshold < 0:
            raise InvalidRuleError(f"threshold must not be negative, got {self.threshold}")
        object.__setattr__(self, "discounted_price", _discounted_price(self.discounted_price))

    def apply(self, cart: DiscountTarget) -> None:
        quantity = cart.count(self.item.id)
        if quantity < self.threshold:
            return
        discount = price_difference(self.item.price, self.discounted_price) * quantity
        logger.debug("%s: %d x %s, discount %s", type(self).__name__, quantity, self.item.id, discount)
        cart.apply_absolute_discount(discount)


DiscountRule = Union[BundleDiscount, FlatPriceOverride, ThresholdPriceOverride]
