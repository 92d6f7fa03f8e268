"""
In‑memory storage.

Users are kept in a dict keyed by e‑mail and products in a dict
keyed by SKU.  Each store owns a single ``threading.Lock`` that is
held for every dict access, so concurrent request handlers (on the
event loop or in worker threads) see each operation as atomic.
Nothing is persisted; all data is lost when the process exits.
"""

import logging
import threading
from typing import Dict, List

from ..core.security import hash_password, verify_password
from ..schemas.product import Product
from ..schemas.user import UserCredentials
from .errors import AlreadyExistsError, InvalidInfoError, NotFoundError

logger = logging.getLogger(__name__)


class InMemoryUserStorage:
    """User store; only the password hash is retained."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: Dict[str, str] = {}

    def create(self, user: UserCredentials) -> None:
        # Hash before taking the lock; PBKDF2 is slow on purpose.
        hashed = hash_password(user.password)
        with self._lock:
            if user.email in self._users:
                raise AlreadyExistsError(user.email)
            self._users[user.email] = hashed
        logger.debug("Stored user %s", user.email)

    def verify(self, user: UserCredentials) -> None:
        with self._lock:
            hashed = self._users.get(user.email)
        if hashed is None or not verify_password(user.password, hashed):
            raise InvalidInfoError()


class InMemoryProductStorage:
    """Product store.

    Records are copied on the way in and on the way out, so callers
    can never alter stored state through an object they hold.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._products: Dict[str, Product] = {}

    def create(self, product: Product) -> None:
        with self._lock:
            if product.sku in self._products:
                raise AlreadyExistsError(product.sku)
            self._products[product.sku] = product.model_copy()

    def update(self, product: Product) -> None:
        with self._lock:
            if product.sku not in self._products:
                raise NotFoundError(product.sku)
            self._products[product.sku] = product.model_copy()

    def delete(self, sku: str) -> None:
        with self._lock:
            if sku not in self._products:
                raise NotFoundError(sku)
            del self._products[sku]

    def get(self, sku: str) -> Product:
        with self._lock:
            item = self._products.get(sku)
            if item is None:
                raise NotFoundError(sku)
            return item.model_copy()

    def list(self) -> List[Product]:
        with self._lock:
            return [item.model_copy() for item in self._products.values()]
