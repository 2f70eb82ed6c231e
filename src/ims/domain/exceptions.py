"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the API and CLI layers can catch them uniformly and map them to an HTTP
status or a user-friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input is missing or malformed, or a business rule was violated."""


class ConflictError(DomainException):
    """A uniqueness constraint (SKU, supplier email) would be broken."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ReferenceNotFoundError(EntityNotFoundError):
    """An entity referenced from another one (e.g. an order's supplier) does not exist.

    Distinguished from EntityNotFoundError because the caller addressed a
    different, existing resource: the request is bad, not the URL.
    """


class PersistenceError(DomainException):
    """The underlying store failed in a way the domain cannot classify."""
