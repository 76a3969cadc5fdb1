"""Checkout: commands, queries and handlers (DI of repositories)."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping

from adcheckout.ddd import Command, Query
from adcheckout.domain import UnknownItemError

from .domain import Checkout, Item
from .infrastructure import IAdTypeRepository, IPricingRuleRepository
from .rules import DiscountRule

logger = logging.getLogger(__name__)


@dataclass
class PrepareCheckout(Command):
    """Total of a customer's cart; item_ids repeats an id once per purchased unit."""
    customer_id: str
    item_ids: list[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> PrepareCheckout:
        """Build from {"customerId": ..., "cart": {"items": [{"id": ...}, ...]}} ("ads" is accepted for "items")."""
        cart = payload.get("cart") or {}
        entries = cart.get("items")
        if entries is None:
            entries = cart.get("ads", [])
        return cls(customer_id=payload["customerId"], item_ids=[entry["id"] for entry in entries])


@dataclass
class ListAdTypes(Query):
    pass


@dataclass
class GetCustomerRules(Query):
    customer_id: str


class PrepareCheckoutHandler:
    def __init__(self, pricing_rule_repository: IPricingRuleRepository, ad_type_repository: IAdTypeRepository):
        self._rules = pricing_rule_repository
        self._ad_types = ad_type_repository

    def __call__(self, cmd: PrepareCheckout) -> Decimal:
        # resolve every id first so an unknown one never reaches the cart
        items = [self._lookup(item_id) for item_id in cmd.item_ids]
        rules = self._rules.find_by_customer(cmd.customer_id)
        if not rules:
            logger.debug("No pricing rules for customer %r", cmd.customer_id)

        checkout = Checkout(rules)
        for item in items:
            checkout.add(item)
        total = checkout.total()
        logger.info("Customer %r: %d item(s), total %s", cmd.customer_id, len(items), total)
        return total

    def _lookup(self, item_id: str) -> Item:
        item = self._ad_types.get(item_id)
        if item is None:
            raise UnknownItemError(item_id)
        return item


class ListAdTypesHandler:
    def __init__(self, ad_type_repository: IAdTypeRepository):
        self._ad_types = ad_type_repository

    def __call__(self, query: ListAdTypes) -> list[Item]:
        return self._ad_types.find_all()


class GetCustomerRulesHandler:
    def __init__(self, pricing_rule_repository: IPricingRuleRepository):
        self._rules = pricing_rule_repository

    def __call__(self, query: GetCustomerRules) -> list[DiscountRule]:
        return self._rules.find_by_customer(query.customer_id)
