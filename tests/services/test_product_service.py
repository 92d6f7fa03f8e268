"""Product service: existence semantics mapped to domain errors.

Invariants:
    - Adding an existing SKU raises ProductExistsError
    - Update/delete/search on an unknown SKU raise ProductNotFoundError
    - Update replaces every non-key field
    - List returns exactly the stored products, in any order
    - Concurrent adds of distinct SKUs are all kept
    - Storage calls run in worker threads, so concurrent service calls overlap
"""

import asyncio
import threading

import pytest

from inventory_api.app.core.errors import ProductExistsError, ProductNotFoundError, ServiceError
from inventory_api.app.services.product_service import ProductService
from inventory_api.app.storage.errors import StorageError
from tests.conftest import make_product


class BrokenProductStorage:
    def _fail(self, *args):
        raise StorageError("connection reset")

    create = update = delete = get = list = _fail


class RendezvousProductStorage:
    """Store whose create returns only once two callers are inside it at the same time."""

    def __init__(self):
        self.barrier = threading.Barrier(2, timeout=5)
        self.skus = []

    def create(self, product):
        self.barrier.wait()
        self.skus.append(product.sku)


async def test_add_same_sku_twice_raises_exists(product_service):
    await product_service.add_product(make_product("A1"))

    with pytest.raises(ProductExistsError):
        await product_service.add_product(make_product("A1"))


async def test_update_unknown_sku_raises_not_found(product_service):
    with pytest.raises(ProductNotFoundError):
        await product_service.update_product(make_product("XBT-001"))


async def test_update_replaces_non_key_fields(product_service):
    await product_service.add_product(make_product("ABT-001"))
    replacement = make_product("ABT-001", name="new", quantity=95, price=1, unit="Pcs", status=0)

    await product_service.update_product(replacement)

    found = await product_service.search_product("ABT-001")
    assert found == replacement


async def test_delete_then_search_raises_not_found(product_service):
    await product_service.add_product(make_product("DBT-001"))

    await product_service.delete_product("DBT-001")

    with pytest.raises(ProductNotFoundError):
        await product_service.search_product("DBT-001")


async def test_delete_twice_raises_not_found(product_service):
    await product_service.add_product(make_product("DBT-001"))
    await product_service.delete_product("DBT-001")

    with pytest.raises(ProductNotFoundError):
        await product_service.delete_product("DBT-001")


async def test_search_returns_matching_product(product_service):
    await product_service.add_product(make_product("SBT-001"))
    await product_service.add_product(make_product("SBT-002"))

    found = await product_service.search_product("SBT-002")

    assert found.sku == "SBT-002"


async def test_list_empty_store(product_service):
    assert await product_service.list_products() == []


async def test_list_after_n_adds_returns_n(product_service):
    skus = {f"L-{i}" for i in range(5)}
    for sku in skus:
        await product_service.add_product(make_product(sku))

    listed = await product_service.list_products()

    assert len(listed) == 5
    assert {p.sku for p in listed} == skus


async def test_concurrent_adds_all_succeed(product_service):
    skus = [f"C-{i}" for i in range(100)]

    await asyncio.gather(*(product_service.add_product(make_product(sku)) for sku in skus))

    assert {p.sku for p in await product_service.list_products()} == set(skus)


async def test_concurrent_adds_overlap_in_storage():
    storage = RendezvousProductStorage()
    service = ProductService(storage)

    await asyncio.gather(service.add_product(make_product("R-1")), service.add_product(make_product("R-2")))

    assert sorted(storage.skus) == ["R-1", "R-2"]


async def test_unclassified_storage_error_becomes_service_error():
    service = ProductService(BrokenProductStorage())

    with pytest.raises(ServiceError, match="add product"):
        await service.add_product(make_product("A1"))
    with pytest.raises(ServiceError, match="update product"):
        await service.update_product(make_product("A1"))
    with pytest.raises(ServiceError, match="delete product"):
        await service.delete_product("A1")
    with pytest.raises(ServiceError, match="list product"):
        await service.list_products()
    with pytest.raises(ServiceError, match="search product"):
        await service.search_product("A1")
