"""Checkout bounded context: repositories via .repository(), use case and lookups via .command()/.query()."""
from adcheckout.ddd import DomainModule

from .application import (
    GetCustomerRules,
    GetCustomerRulesHandler,
    ListAdTypes,
    ListAdTypesHandler,
    PrepareCheckout,
    PrepareCheckoutHandler,
)
from .infrastructure import (
    AdTypeRepositoryImpl,
    IAdTypeRepository,
    IPricingRuleRepository,
    PricingRuleRepositoryImpl,
)


def build_checkout_module() -> DomainModule:
    """Fresh module object; use .instance() on it to swap repositories (e.g. in tests)."""
    return (
        DomainModule("checkout")
        .repository(IAdTypeRepository, AdTypeRepositoryImpl)
        .repository(IPricingRuleRepository, PricingRuleRepositoryImpl)
        .command(PrepareCheckout, PrepareCheckoutHandler)
        .query(ListAdTypes, ListAdTypesHandler)
        .query(GetCustomerRules, GetCustomerRulesHandler)
    )


checkout_module = build_checkout_module()
