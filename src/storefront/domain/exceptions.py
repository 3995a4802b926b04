"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidCode(ValidationError):
    """A manual discount code did not resolve for the current customer."""


class EmptyCart(ValidationError):
    """Checkout was attempted with no lines in the cart."""


class MissingShippingAddress(ValidationError):
    """Checkout was attempted without a shipping address."""


class InvalidStatusTransition(ValidationError):
    """An order status change that the state machine does not allow."""
