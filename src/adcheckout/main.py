"""
App composition — everything via module objects and app.register().
"""
from __future__ import annotations

from typing import Optional

from adcheckout.checkout.module import build_checkout_module
from adcheckout.core import Application, Settings, configure_logging
from adcheckout.ddd import DomainModule


def create_app(settings: Optional[Settings] = None, checkout: Optional[DomainModule] = None) -> Application:
    """Application with the checkout context registered; settings default to ADCHECKOUT_* env vars."""
    settings = settings if settings is not None else Settings.from_env()
    configure_logging(settings.log_level)

    app = Application(config=settings)
    app.register(checkout if checkout is not None else build_checkout_module())
    return app
