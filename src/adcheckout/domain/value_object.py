"""ValueObject — value without identity; immutable, equality by fields."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject:
    """Value object base: subclasses are frozen dataclasses; copies never alias state."""
    pass
