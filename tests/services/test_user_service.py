"""User service: registration, login and token validation.

Invariants:
    - Duplicate registration raises UserExistsError
    - Login with wrong password or unknown e-mail raises UserInvalidError
    - Tokens issued by login pass validate_token; foreign or malformed ones don't
    - Tokens carry the e-mail as audience, an issuance time and no expiry
    - Unexpected storage failures surface as ServiceError chained to the cause
    - Storage calls (password hashing) run off the event loop
"""

import asyncio
import threading

import pytest

from inventory_api.app.core.errors import (
    ServiceError,
    TokenInvalidError,
    UserExistsError,
    UserInvalidError,
)
from inventory_api.app.schemas.user import UserCredentials
from inventory_api.app.services.user_service import UserService
from inventory_api.app.storage.errors import StorageError
from tests.conftest import TEST_SECRET

EMAIL = "abc@gmail.com"
PASSWORD = "123456"


def creds(email=EMAIL, password=PASSWORD):
    return UserCredentials(email=email, password=password)


class BrokenUserStorage:
    """Store whose every call fails with an unclassified storage error."""

    def create(self, user):
        raise StorageError("disk on fire")

    def verify(self, user):
        raise StorageError("disk on fire")


class GatedUserStorage:
    """Store whose verify blocks until the event loop opens the gate."""

    def __init__(self):
        self.gate = threading.Event()
        self.opened_in_time = None

    def create(self, user):
        pass

    def verify(self, user):
        self.opened_in_time = self.gate.wait(timeout=5)


async def test_create_user_twice_raises_user_exists(user_service):
    await user_service.create_user(creds())

    with pytest.raises(UserExistsError):
        await user_service.create_user(creds())


async def test_login_after_register_returns_token(user_service):
    await user_service.create_user(creds())

    login = await user_service.login(creds())

    assert login.token
    assert login.token.count(".") == 2


async def test_login_wrong_password_raises_user_invalid(user_service):
    await user_service.create_user(creds())

    with pytest.raises(UserInvalidError):
        await user_service.login(creds(password="nope"))


async def test_login_unknown_email_raises_user_invalid(user_service):
    with pytest.raises(UserInvalidError):
        await user_service.login(creds(email="nobody@gmail.com"))


async def test_issued_token_is_valid_and_has_no_expiry(user_service):
    await user_service.create_user(creds())
    login = await user_service.login(creds())

    claims = await user_service.validate_token(login.token)

    assert claims["aud"] == [EMAIL]
    assert isinstance(claims["iat"], int)
    assert "exp" not in claims


@pytest.mark.parametrize(
    "token",
    ["", "garbage", "a.b.c", "eyJhbGciOiJub25lIn0.eyJhdWQiOlsieCJdfQ."],
)
async def test_malformed_or_unsigned_token_rejected(user_service, token):
    with pytest.raises(TokenInvalidError):
        await user_service.validate_token(token)


async def test_token_from_other_secret_rejected(user_storage):
    issuer = UserService(user_storage, "another-secret")
    await issuer.create_user(creds())
    login = await issuer.login(creds())

    verifier = UserService(user_storage, TEST_SECRET)
    with pytest.raises(TokenInvalidError):
        await verifier.validate_token(login.token)


def test_empty_secret_rejected(user_storage):
    with pytest.raises(ValueError):
        UserService(user_storage, "")


async def test_storage_failure_wrapped_with_context():
    service = UserService(BrokenUserStorage(), TEST_SECRET)

    with pytest.raises(ServiceError, match="create user") as exc_info:
        await service.create_user(creds())
    assert isinstance(exc_info.value.__cause__, StorageError)

    with pytest.raises(ServiceError, match="verify user"):
        await service.login(creds())


async def test_login_does_not_block_event_loop():
    storage = GatedUserStorage()
    service = UserService(storage, TEST_SECRET)

    login = asyncio.create_task(service.login(creds()))
    await asyncio.sleep(0)
    # Opens the gate in time only when verify runs in another thread.
    storage.gate.set()
    await login

    assert storage.opened_in_time is True


async def test_register_and_login_run_concurrently(user_storage, user_service):
    emails = [f"u{i}@gmail.com" for i in range(8)]

    await asyncio.gather(*(user_service.create_user(creds(email)) for email in emails))
    tokens = await asyncio.gather(*(user_service.login(creds(email)) for email in emails))

    assert all(t.token for t in tokens)
    for email in emails:
        user_storage.verify(creds(email))
