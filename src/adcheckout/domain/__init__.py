"""Domain layer base classes: ValueObject, Repository, errors."""
from adcheckout.domain.errors import AdCheckoutError, InvalidRuleError, UnknownItemError
from adcheckout.domain.repository import Repository
from adcheckout.domain.value_object import ValueObject

__all__ = [
    "AdCheckoutError",
    "InvalidRuleError",
    "UnknownItemError",
    "Repository",
    "ValueObject",
]
