import logging
from decimal import Decimal

import pytest
from typer.testing import CliRunner

from adcheckout.checkout import Cart, Item
from adcheckout.core import Settings
from adcheckout.main import create_app


@pytest.fixture(autouse=True)
def package_logger():
    """Restore the adcheckout logger after tests that configure it."""
    logger = logging.getLogger("adcheckout")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers


@pytest.fixture
def standard_item():
    """Item priced 25."""
    return Item(id="standard", price=Decimal("25"))


@pytest.fixture
def cart():
    return Cart()


@pytest.fixture
def settings():
    return Settings(log_level="WARNING", default_customer="default")


@pytest.fixture
def application(settings):
    """Application with the checkout context over the built-in catalog."""
    return create_app(settings)


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()
