"""Tests for discount rules: eligibility and the discount each registers."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from adcheckout.checkout import BundleDiscount, Cart, FlatPriceOverride, Item, ThresholdPriceOverride
from adcheckout.checkout.rules import bundles_in, price_difference
from adcheckout.domain import InvalidRuleError


def mock_cart(count: int) -> MagicMock:
    cart = MagicMock(spec=Cart)
    cart.count.return_value = count
    return cart


class TestHelpers:
    @pytest.mark.parametrize("quantity,bundles", [(2, 0), (5, 1), (6, 2)])
    def test_bundles_in(self, quantity, bundles):
        assert bundles_in(quantity, 3) == bundles

    def test_price_difference(self):
        assert price_difference(Decimal("50"), Decimal("29.50")) == Decimal("20.50")

    def test_price_difference_is_zero_when_discounted_price_is_higher(self):
        assert price_difference(Decimal("50"), Decimal("51")) == 0


class TestBundleDiscount:
    """3 for 2 on an item priced 50."""

    @pytest.fixture
    def rule(self):
        return BundleDiscount(Item(id="standard", price="50"), 3, 2)

    def test_no_items_no_discount(self, rule):
        cart = mock_cart(0)
        rule.apply(cart)
        cart.apply_absolute_discount.assert_not_called()

    def test_incomplete_bundle_no_discount(self, rule):
        cart = mock_cart(2)
        rule.apply(cart)
        cart.apply_absolute_discount.assert_not_called()

    def test_one_bundle(self, rule):
        cart = mock_cart(3)
        rule.apply(cart)
        cart.count.assert_called_once_with("standard")
        cart.apply_absolute_discount.assert_called_once_with(Decimal("50"))

    def test_two_bundles(self, rule):
        cart = mock_cart(6)
        rule.apply(cart)
        cart.apply_absolute_discount.assert_called_once_with(Decimal("100"))

    def test_remainder_units_are_charged(self, rule):
        cart = mock_cart(5)
        rule.apply(cart)
        cart.apply_absolute_discount.assert_called_once_with(Decimal("50"))

    def test_invalid_parameters(self):
        item = Item(id="standard", price="50")
        with pytest.raises(InvalidRuleError):
            BundleDiscount(item, 0, 0)
        with pytest.raises(InvalidRuleError):
            BundleDiscount(item, 3, 4)
        with pytest.raises(ValueError):
            BundleDiscount(item, 3, -1)


class TestFlatPriceOverride:
    """Item priced 70 sold at 50."""

    @pytest.fixture
    def rule(self):
        return FlatPriceOverride(Item(id="standard", price="70"), "50")

    def test_no_items_no_discount(self, rule):
        cart = mock_cart(0)
        rule.apply(cart)
        cart.apply_absolute_discount.assert_not_called()

    def test_discount_per_unit(self, rule):
        cart = mock_cart(3)
        rule.apply(cart)
        cart.apply_absolute_discount.assert_called_once_with(Decimal("60"))

    def test_higher_override_price_gives_zero_discount(self):
        rule = FlatPriceOverride(Item(id="standard", price="70"), "80")
        cart = mock_cart(2)
        rule.apply(cart)
        cart.apply_absolute_discount.assert_called_once_with(Decimal("0"))

    def test_negative_price_rejected(self):
        with pytest.raises(InvalidRuleError):
            FlatPriceOverride(Item(id="standard", price="70"), "-1")


class TestThresholdPriceOverride:
    """Item priced 70 sold at 60 from 2 units."""

    @pytest.fixture
    def rule(self):
        return ThresholdPriceOverride(Item(id="standard", price="70"), 2, "60")

    def test_below_threshold_no_discount(self, rule):
        cart = mock_cart(1)
        rule.apply(cart)
        cart.apply_absolute_discount.assert_not_called()

    def test_at_threshold(self, rule):
        cart = mock_cart(2)
        rule.apply(cart)
        cart.apply_absolute_discount.assert_called_once_with(Decimal("20"))

    def test_past_threshold_discounts_every_unit(self, rule):
        cart = mock_cart(3)
        rule.apply(cart)
        cart.apply_absolute_discount.assert_called_once_with(Decimal("30"))

    def test_negative_threshold_rejected(self):
        with pytest.raises(InvalidRuleError):
            ThresholdPriceOverride(Item(id="standard", price="70"), -1, "60")


class TestAgainstRealCart:
    def test_rules_only_touch_discounts(self):
        item = Item(id="standard", price="50")
        cart = Cart()
        for _ in range(3):
            cart.add(item)
        lines_before = cart.lines

        BundleDiscount(item, 3, 2).apply(cart)
        FlatPriceOverride(item, "45").apply(cart)

        assert cart.lines == lines_before
        assert cart.discounts.absolute == Decimal("65")
        assert cart.total() == Decimal("85")

    def test_rules_are_value_objects(self):
        item = Item(id="standard", price="50")
        assert FlatPriceOverride(item, "45") == FlatPriceOverride(item, Decimal("45"))
