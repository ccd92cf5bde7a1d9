"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and map them to a
status code or a user-friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidProductError(ValidationError):
    """Product data is invalid (empty name, non-positive price, negative stock)."""


class InvalidQuantityError(ValidationError):
    """A stock movement quantity is not positive."""


class InvalidPriceError(ValidationError):
    """A new product price is not positive."""


class InsufficientStockError(DomainException):
    """More units were requested than are currently in stock."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """No product exists with the requested ID."""


class RepositoryError(DomainException):
    """The underlying store failed. Details are logged, never surfaced."""


class AuthenticationError(DomainException):
    """Base class for credential and token failures."""


class InvalidCredentialsError(AuthenticationError):
    """Unknown email or wrong password. Deliberately indistinguishable."""


class AuthenticationFailedError(AuthenticationError):
    """A candidate password does not match the stored hash."""


class UnauthorizedError(AuthenticationError):
    """A request carried no usable bearer token."""


class TokenGenerationError(DomainException):
    """A signed token could not be issued."""


class HashingError(DomainException):
    """A password could not be hashed."""
