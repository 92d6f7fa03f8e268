"""
Service layer for products.

Thin wrapper over a ``ProductStorage`` that turns storage errors into
domain errors.  Storage calls run in a worker thread, like the user
service.  The ``status`` field is carried as opaque data; no state
transitions are enforced here.
"""

import asyncio
import logging
from typing import List

from ..core.errors import ProductExistsError, ProductNotFoundError, ServiceError
from ..schemas.product import Product
from ..storage.base import ProductStorage
from ..storage.errors import AlreadyExistsError, NotFoundError, StorageError

logger = logging.getLogger(__name__)


class ProductService:
    """Service class for managing products."""

    def __init__(self, storage: ProductStorage) -> None:
        self._storage = storage

    async def add_product(self, product: Product) -> None:
        """Store a new product; ``ProductExistsError`` if the SKU is taken."""
        try:
            await asyncio.to_thread(self._storage.create, product)
        except AlreadyExistsError as exc:
            raise ProductExistsError(product.sku) from exc
        except StorageError as exc:
            raise ServiceError(f"add product: {exc}") from exc
        logger.info("Added product %s", product.sku)

    async def update_product(self, product: Product) -> None:
        """Replace every field of an existing product.

        The SKU selects the record and is never changed.  Raises
        ``ProductNotFoundError`` if no product has that SKU.
        """
        try:
            await asyncio.to_thread(self._storage.update, product)
        except NotFoundError as exc:
            raise ProductNotFoundError(product.sku) from exc
        except StorageError as exc:
            raise ServiceError(f"update product: {exc}") from exc
        logger.info("Updated product %s", product.sku)

    async def delete_product(self, sku: str) -> None:
        try:
            await asyncio.to_thread(self._storage.delete, sku)
        except NotFoundError as exc:
            raise ProductNotFoundError(sku) from exc
        except StorageError as exc:
            raise ServiceError(f"delete product: {exc}") from exc
        logger.info("Deleted product %s", sku)

    async def list_products(self) -> List[Product]:
        """Return a snapshot of all products in no particular order."""
        try:
            return await asyncio.to_thread(self._storage.list)
        except StorageError as exc:
            raise ServiceError(f"list product: {exc}") from exc

    async def search_product(self, sku: str) -> Product:
        """Look up a single product by exact SKU."""
        try:
            return await asyncio.to_thread(self._storage.get, sku)
        except NotFoundError as exc:
            raise ProductNotFoundError(sku) from exc
        except StorageError as exc:
            raise ServiceError(f"search product: {exc}") from exc
