from adcheckout.core.app import Application
from adcheckout.core.container import Container
from adcheckout.core.module import Module
from adcheckout.core.config import Config, Settings, configure_logging

__all__ = [
    "Application",
    "Container",
    "Module",
    "Config",
    "Settings",
    "configure_logging",
]
