"""Bounded-context building blocks: DomainModule, Command, Query."""
from adcheckout.ddd.commands import Command, Query
from adcheckout.ddd.domain_module import DomainModule

__all__ = ["Command", "Query", "DomainModule"]
