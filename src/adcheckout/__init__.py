"""
adcheckout — ad checkout with customer-specific pricing rules.
Application is composed from module objects via app.register(module).
"""
from adcheckout.core import Application, Config, Container, Module, Settings
from adcheckout.checkout import Checkout, Cart, Item, checkout_module
from adcheckout.main import create_app

__all__ = [
    "Application",
    "Config",
    "Container",
    "Module",
    "Settings",
    "Cart",
    "Checkout",
    "Item",
    "checkout_module",
    "create_app",
]
