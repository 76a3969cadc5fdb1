"""Checkout domain: catalog item, cart with discount accumulator, checkout aggregate."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Optional, Union

from adcheckout.domain import ValueObject

if TYPE_CHECKING:
    from adcheckout.checkout.rules import DiscountRule

logger = logging.getLogger(__name__)

Money = Union[Decimal, int, float, str]

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value: Money) -> Decimal:
    """Convert a price or percentage to Decimal; floats go through str() to keep their printed value."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


@dataclass(frozen=True)
class Item(ValueObject):
    """Catalog entry (an ad type). Price is stored as Decimal."""
    id: str
    price: Decimal
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "price", to_decimal(self.price))


@dataclass(frozen=True)
class CartLine(ValueObject):
    item_id: str
    price: Decimal
    quantity: int = 1

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity

    def incremented(self) -> CartLine:
        return replace(self, quantity=self.quantity + 1)


@dataclass(frozen=True)
class Discounts(ValueObject):
    """Snapshot of a cart's accumulated discounts: absolute amount and relative percentage (0-100)."""
    absolute: Decimal = ZERO
    relative: Decimal = ZERO


class Cart:
    """
    Line items keyed by item id plus the discounts accumulated during one total computation.

    Discount rules only ever add to the accumulators; reset_discounts() starts over.
    The total is not floored at zero.
    """

    def __init__(self) -> None:
        self._lines: dict[str, CartLine] = {}
        self._absolute = ZERO
        self._relative = ZERO

    @property
    def discounts(self) -> Discounts:
        return Discounts(absolute=self._absolute, relative=self._relative)

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines.values())

    def add(self, item: Item) -> None:
        line = self._lines.get(item.id)
        if line is None:
            self._lines[item.id] = CartLine(item_id=item.id, price=item.price)
        else:
            self._lines[item.id] = line.incremented()

    def count(self, item_id: Optional[str] = None) -> int:
        """Quantity of item_id (0 when absent), or of all lines when item_id is None."""
        if item_id is None:
            return sum(line.quantity for line in self._lines.values())
        line = self._lines.get(item_id)
        return line.quantity if line is not None else 0

    def apply_absolute_discount(self, amount: Money) -> None:
        """Stack an amount to subtract from the undiscounted total."""
        amount = to_decimal(amount)
        if amount < 0:
            raise ValueError(f"Discount must not be negative: {amount}")
        self._absolute += amount

    def apply_relative_discount(self, percent: Money) -> None:
        """Stack a percentage; percentages add up (10 + 10 is 20, not compounded)."""
        percent = to_decimal(percent)
        if percent < 0:
            raise ValueError(f"Discount must not be negative: {percent}")
        self._relative += percent

    def reset_discounts(self) -> None:
        self._absolute = ZERO
        self._relative = ZERO

    def total_without_discounts(self) -> Decimal:
        return sum((line.subtotal for line in self._lines.values()), ZERO)

    def total(self) -> Decimal:
        # absolute first, then the combined relative percentage
        return (self.total_without_discounts() - self._absolute) * (1 - self._relative / HUNDRED)

    def __repr__(self) -> str:
        return f"Cart(lines={list(self._lines.values())!r}, discounts={self.discounts!r})"


class Checkout:
    """
    Aggregate root: one cart bound to an ordered set of discount rules.
    total() recomputes discounts from scratch on every call.
    """

    def __init__(self, rules: Optional[Iterable[DiscountRule]] = None, cart: Optional[Cart] = None) -> None:
        self._rules: tuple[DiscountRule, ...] = tuple(rules) if rules is not None else ()
        self._cart = cart if cart is not None else Cart()

    @property
    def rules(self) -> tuple[DiscountRule, ...]:
        return self._rules

    @property
    def cart(self) -> Cart:
        return self._cart

    def add(self, item: Item) -> None:
        self._cart.add(item)

    def total(self) -> Decimal:
        self._cart.reset_discounts()
        for rule in self._rules:
            rule.apply(self._cart)
        total = self._cart.total()
        logger.debug(
            "Checkout total %s (%d items, %d rules, %r)",
            total, self._cart.count(), len(self._rules), self._cart.discounts,
        )
        return total
