"""Domain-level exceptions.

Every rule violation in the product/order model is a subclass of
DomainException so the CLI layer can catch them in one place and turn
them into readable messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An invariant on a product, price or order was violated."""
