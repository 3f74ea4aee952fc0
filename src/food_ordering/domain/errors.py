"""
Error hierarchy for the ordering session.

Errors are raised where the bad input is detected (menu/payment lookup,
quantity parsing) and caught once, at the session boundary, where they are
shown to the user and end the session. Nothing inside the domain or the
services swallows them.
"""


class OrderingError(Exception):
    """Base class for every error that terminates an ordering session."""


class InvalidSelection(OrderingError):
    """A menu or payment code outside the accepted set."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} option: {value}")


class InvalidQuantity(OrderingError):
    """Quantity text that is not a finite number in (0, 1000] with at most 4 decimals."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid quantity: {value!r} "
            "(expected a number greater than 0 and at most 1000, with at most 4 decimal places)"
        )


class WorkflowError(OrderingError):
    """The order workflow was driven outside its one-shot sequence."""
