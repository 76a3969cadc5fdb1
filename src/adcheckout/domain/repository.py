"""Repository — read interface over externally supplied reference data."""
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Lookup by id and listing. Implementations are in-memory or backed by storage."""

    @abstractmethod
    def get(self, id: str) -> Optional[T]:
        """Return the entry for id, or None when absent."""
        ...

    @abstractmethod
    def find_all(self) -> list[T]:
        ...
