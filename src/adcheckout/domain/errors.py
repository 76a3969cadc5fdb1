"""Domain errors."""


class AdCheckoutError(Exception):
    """Base for errors raised by adcheckout."""


class InvalidRuleError(AdCheckoutError, ValueError):
    """A discount rule was built with parameters outside their valid range."""


class UnknownItemError(AdCheckoutError, LookupError):
    """An item id is not present in the catalog."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"Unknown item: {item_id!r}")
        self.item_id = item_id
