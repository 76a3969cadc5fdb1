"""Application — composed from modules via app.register(module); dispatches commands and queries."""
from __future__ import annotations

import logging
from typing import Any, Callable

from adcheckout.core.container import Container
from adcheckout.core.module import Module

logger = logging.getLogger(__name__)


class Application:
    """
    Application. Composed from modules via register(module).
    Each command/query type has exactly one handler; execute() runs it synchronously.
    """

    def __init__(self, config: Any = None) -> None:
        self._modules: list[Module] = []
        self._container = Container()
        self._handlers: dict[type, Any] = {}
        if config is not None:
            self._container.register_instance(type(config), config)
            self._container.register_instance("config", config)

    def register(self, module: Module) -> Application:
        """Register a module (e.g. DomainModule). Returns self for chaining."""
        module.register_into(self)
        self._modules.append(module)
        return self

    def add_handler(self, message_type: type, handler: type[Any] | Callable[..., Any]) -> None:
        """Bind a command or query type to a handler class (resolved from DI) or a plain callable."""
        if message_type in self._handlers:
            raise ValueError(f"Handler already registered for {message_type.__name__}")
        if isinstance(handler, type):
            self._container.register_class(handler)
        self._handlers[message_type] = handler

    def handles(self, message_type: type) -> bool:
        return message_type in self._handlers

    def execute(self, message: Any) -> Any:
        """Run the handler registered for type(message) and return its result."""
        message_type = type(message)
        try:
            handler = self._handlers[message_type]
        except KeyError:
            raise LookupError(f"No handler registered for {message_type.__name__}") from None
        if isinstance(handler, type):
            handler = self._container.resolve(handler)
        logger.info("Executing %s", message_type.__name__)
        return handler(message)

    @property
    def modules(self) -> list[Module]:
        return list(self._modules)

    @property
    def container(self) -> Container:
        """DI container: registration and resolution of dependencies."""
        return self._container
