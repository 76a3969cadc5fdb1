"""Infrastructure: repository interfaces and in-memory implementations over static reference data."""
from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from adcheckout.domain import Repository

from .domain import Item
from .rules import BundleDiscount, DiscountRule, FlatPriceOverride, ThresholdPriceOverride

AD_TYPES: Mapping[str, Item] = MappingProxyType({
    "classic": Item(id="classic", name="Classic Ad", price="269.99"),
    "standout": Item(id="standout", name="Standout Ad", price="322.99"),
    "premium": Item(id="premium", name="Premium Ad", price="394.99"),
})


def _customer_rules(ad_types: Mapping[str, Item]) -> Mapping[str, Callable[[], list[DiscountRule]]]:
    classic, standout, premium = ad_types["classic"], ad_types["standout"], ad_types["premium"]
    return MappingProxyType({
        "Unilever": lambda: [BundleDiscount(classic, 3, 2)],
        "Apple": lambda: [FlatPriceOverride(standout, "299.99")],
        "Nike": lambda: [ThresholdPriceOverride(premium, 4, "379.99")],
        "Ford": lambda: [
            BundleDiscount(classic, 5, 4),
            FlatPriceOverride(standout, "309.99"),
            ThresholdPriceOverride(premium, 3, "389.99"),
        ],
    })


class IAdTypeRepository(Repository[Item]):
    pass


class IPricingRuleRepository(ABC):
    """Ordered discount rules per customer; unknown customers have none."""

    @abstractmethod
    def find_by_customer(self, customer_id: str) -> list[DiscountRule]:
        ...


class AdTypeRepositoryImpl(IAdTypeRepository):
    def __init__(self, ad_types: Optional[Mapping[str, Item]] = None):
        self._store = ad_types if ad_types is not None else AD_TYPES

    def get(self, id: str) -> Optional[Item]:
        return self._store.get(id)

    def find_all(self) -> list[Item]:
        return list(self._store.values())


class PricingRuleRepositoryImpl(IPricingRuleRepository):
    def __init__(self, ad_types: Optional[Mapping[str, Item]] = None):
        self._rules = _customer_rules(ad_types if ad_types is not None else AD_TYPES)

    def find_by_customer(self, customer_id: str) -> list[DiscountRule]:
        factory = self._rules.get(customer_id)
        return factory() if factory is not None else []
