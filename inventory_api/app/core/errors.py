"""
Domain errors raised by the service layer.

Each class marks one condition the HTTP layer can tell apart
(duplicate user, bad credentials, duplicate or missing product,
token problems).  ``ServiceError`` wraps any other storage failure
together with the operation that hit it and is reported as an
internal error.
"""


class InventoryError(Exception):
    """Base class for all service‑level errors."""


class ServiceError(InventoryError):
    """Unexpected failure below the service, wrapped with call‑site context."""


class UserExistsError(InventoryError):
    """A user with this e‑mail is already registered."""

    def __init__(self, email: str) -> None:
        super().__init__(f"user already exist: {email}")
        self.email = email


class UserInvalidError(InventoryError):
    """E‑mail unknown or password does not match."""

    def __init__(self) -> None:
        super().__init__("user invalid")


class ProductExistsError(InventoryError):
    def __init__(self, sku: str) -> None:
        super().__init__(f"item exist: {sku}")
        self.sku = sku


class ProductNotFoundError(InventoryError):
    def __init__(self, sku: str) -> None:
        super().__init__(f"item not found: {sku}")
        self.sku = sku


class TokenSigningError(InventoryError):
    """Token could not be signed; internal, never retried."""


class TokenInvalidError(InventoryError):
    """Token is malformed or its signature does not verify."""
