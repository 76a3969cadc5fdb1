"""Checkout bounded context: cart, discount rules and the PrepareCheckout use case."""
from adcheckout.checkout.application import (
    GetCustomerRules,
    ListAdTypes,
    PrepareCheckout,
    PrepareCheckoutHandler,
)
from adcheckout.checkout.domain import Cart, CartLine, Checkout, Discounts, Item
from adcheckout.checkout.infrastructure import (
    AD_TYPES,
    AdTypeRepositoryImpl,
    IAdTypeRepository,
    IPricingRuleRepository,
    PricingRuleRepositoryImpl,
)
from adcheckout.checkout.module import build_checkout_module, checkout_module
from adcheckout.checkout.rules import (
    BundleDiscount,
    DiscountRule,
    FlatPriceOverride,
    ThresholdPriceOverride,
)

__all__ = [
    "AD_TYPES",
    "AdTypeRepositoryImpl",
    "BundleDiscount",
    "Cart",
    "CartLine",
    "Checkout",
    "DiscountRule",
    "Discounts",
    "FlatPriceOverride",
    "GetCustomerRules",
    "IAdTypeRepository",
    "IPricingRuleRepository",
    "Item",
    "ListAdTypes",
    "PrepareCheckout",
    "PrepareCheckoutHandler",
    "PricingRuleRepositoryImpl",
    "ThresholdPriceOverride",
    "build_checkout_module",
    "checkout_module",
]
