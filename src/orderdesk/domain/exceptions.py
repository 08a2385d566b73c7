"""Domain-level exceptions.

Most invalid operator actions are no-ops that report "not ready" through
their return value. The exceptions below cover the inputs that cannot be
absorbed that way. The CLI layer catches DomainException uniformly and
displays the message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidNumericInput(ValidationError):
    """Price or quantity text could not be parsed into an acceptable number."""


class InvalidOrderIdError(ValidationError):
    """An order identifier does not follow the PREFIX-NNN format."""


class UnknownCustomerFieldError(ValidationError):
    """A customer profile field name does not exist."""


class DuplicateOrderError(DomainException):
    """An order with the same identifier is already in the collection."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
