"""
DomainModule — one object per bounded context.
Describes repositories, bindings, commands and queries.
"""
from __future__ import annotations

from typing import Any, Callable, Type

from adcheckout.core.app import Application
from adcheckout.core.module import Module
from adcheckout.ddd.commands import Command, Query


class DomainModule(Module):
    """
    One object = full bounded context.
    .repository() .bind() .instance() .command() .query()
    Register via app.register(module).
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._repositories: list[tuple[Type[Any], Type[Any]]] = []
        self._bindings: list[tuple[Type[Any], Type[Any]]] = []
        self._instances: list[tuple[Type[Any], Any]] = []
        self._commands: list[tuple[Type[Command], Type[Any] | Callable[..., Any]]] = []
        self._queries: list[tuple[Type[Query], Type[Any] | Callable[..., Any]]] = []

    def repository(self, interface: Type[Any], impl: Type[Any]) -> DomainModule:
        self._repositories.append((interface, impl))
        return self

    def bind(self, interface: Type[Any], impl: Type[Any]) -> DomainModule:
        """Register any interface → implementation for DI (e.g. domain services)."""
        self._bindings.append((interface, impl))
        return self

    def instance(self, interface: Type[Any], obj: Any) -> DomainModule:
        """Register a ready-made object (e.g. a test double repository)."""
        self._instances.append((interface, obj))
        return self

    def command(self, cmd_type: Type[Command], handler: Type[Any] | Callable[..., Any]) -> DomainModule:
        self._commands.append((cmd_type, handler))
        return self

    def query(self, query_type: Type[Query], handler: Type[Any] | Callable[..., Any]) -> DomainModule:
        self._queries.append((query_type, handler))
        return self

    def register_into(self, app: Application) -> None:
        container = app.container

        # Repositories and bindings: interface -> implementation
        for iface, impl in [*self._repositories, *self._bindings]:
            container.register_class(impl)
            container.register(iface, lambda c=container, i=impl: c.resolve(i))

        # Instances registered last win over class bindings for the same interface
        for iface, obj in self._instances:
            container.register_instance(iface, obj)

        for message_type, handler in [*self._commands, *self._queries]:
            app.add_handler(message_type, handler)
