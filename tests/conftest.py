"""Root conftest: shared fixtures for storage, service and HTTP tests.

Invariants:
    - Every test gets fresh in-memory stores (no state leaks between tests)
    - Services and the app share one test secret, so tokens minted by
      either side are accepted by the other
"""

import os

# Keep the import-time app away from any real secret in the environment.
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from httpx import ASGITransport, AsyncClient

from inventory_api.app.core.config import Settings
from inventory_api.app.main import create_app
from inventory_api.app.schemas.product import Product
from inventory_api.app.schemas.user import UserCredentials
from inventory_api.app.services.product_service import ProductService
from inventory_api.app.services.user_service import UserService
from inventory_api.app.storage.memory import InMemoryProductStorage, InMemoryUserStorage

TEST_SECRET = "test-secret"
REGISTERED_EMAIL = "user@gmail.com"
REGISTERED_PASSWORD = "password"


def make_product(sku: str = "OBT-001", **overrides) -> Product:
    fields = dict(sku=sku, name=f"{sku}-Sehat01", quantity=100, price=100000, unit="Carton", status=1)
    fields.update(overrides)
    return Product(**fields)


@pytest.fixture
def user_storage():
    return InMemoryUserStorage()


@pytest.fixture
def product_storage():
    return InMemoryProductStorage()


@pytest.fixture
def user_service(user_storage):
    return UserService(user_storage, TEST_SECRET)


@pytest.fixture
def product_service(product_storage):
    return ProductService(product_storage)


@pytest.fixture
def app(user_storage, product_storage):
    user_storage.create(UserCredentials(email=REGISTERED_EMAIL, password=REGISTERED_PASSWORD))
    return create_app(
        Settings(secret_key=TEST_SECRET),
        user_storage=user_storage,
        product_storage=product_storage,
    )


@pytest.fixture
async def client(app):
    """HTTP client bound to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def auth_headers(client):
    """Authorization header obtained through the login route."""
    res = await client.post(
        "/api/auth/login",
        data={"email": REGISTERED_EMAIL, "password": REGISTERED_PASSWORD},
    )
    assert res.status_code == 200
    return {"Authorization": f"Bearer {res.json()['token']}"}
