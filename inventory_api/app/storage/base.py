"""
Storage contracts consumed by the services.

Services receive a store through their constructor and only call
the methods declared here, so any object with matching methods can
back them.  Failures are reported by raising the exceptions from
``storage.errors``.
"""

from typing import List, Protocol

from ..schemas.product import Product
from ..schemas.user import UserCredentials


class UserStorage(Protocol):
    """Contract for user persistence, keyed by e‑mail."""

    def create(self, user: UserCredentials) -> None:
        """Store a new user; raise ``AlreadyExistsError`` if the e‑mail is taken."""
        ...

    def verify(self, user: UserCredentials) -> None:
        """Raise ``InvalidInfoError`` unless e‑mail and password match a stored user."""
        ...


class ProductStorage(Protocol):
    """Contract for product persistence, keyed by SKU."""

    def create(self, product: Product) -> None: ...

    def update(self, product: Product) -> None: ...

    def delete(self, sku: str) -> None: ...

    def get(self, sku: str) -> Product: ...

    def list(self) -> List[Product]: ...
