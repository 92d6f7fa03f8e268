"""
Business logic for users.

``UserService`` registers users, checks credentials and issues and
validates login tokens.  Persistence is delegated to a
``UserStorage``; the HMAC secret used for tokens is handed to the
constructor and never changes afterwards.

Storage calls run in a worker thread (``asyncio.to_thread``): password
hashing is CPU bound and must not stall the event loop.
"""

import asyncio
import logging
from typing import Any, Dict

from ..core.errors import ServiceError, TokenInvalidError, UserExistsError, UserInvalidError
from ..core.security import create_access_token, decode_access_token, login_claims
from ..schemas.user import LoginRead, UserCredentials
from ..storage.base import UserStorage
from ..storage.errors import AlreadyExistsError, InvalidInfoError, StorageError

logger = logging.getLogger(__name__)


class UserService:
    """Сервис для работы с пользователями.

    Регистрация, проверка учётных данных и выпуск JWT.  Токены не
    имеют срока действия и не отзываются: любой токен с верной
    подписью открывает доступ ко всем защищённым маршрутам.
    """

    def __init__(self, storage: UserStorage, secret_key: str) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._storage = storage
        self._secret_key = secret_key

    async def create_user(self, user: UserCredentials) -> None:
        """Register a new user.

        Raises ``UserExistsError`` if the e‑mail is already taken.
        """
        logger.info("Registering user %s", user.email)
        try:
            await asyncio.to_thread(self._storage.create, user)
        except AlreadyExistsError as exc:
            raise UserExistsError(user.email) from exc
        except StorageError as exc:
            raise ServiceError(f"create user: {exc}") from exc

    async def login(self, user: UserCredentials) -> LoginRead:
        """Check credentials and return a freshly signed token.

        The token's audience is the user's e‑mail and ``iat`` the
        current time; no expiry is set.  Raises ``UserInvalidError``
        for an unknown e‑mail or a wrong password and
        ``TokenSigningError`` if signing fails.
        """
        logger.info("User login %s", user.email)
        try:
            await asyncio.to_thread(self._storage.verify, user)
        except InvalidInfoError as exc:
            raise UserInvalidError() from exc
        except StorageError as exc:
            raise ServiceError(f"verify user: {exc}") from exc

        token = create_access_token(login_claims(user.email), self._secret_key)
        return LoginRead(token=token)

    async def validate_token(self, token: str) -> Dict[str, Any]:
        """Verify a token's signature and return its claims.

        Neither expiry nor audience is checked.  Raises
        ``TokenInvalidError`` when the token is malformed or was not
        signed with this service's secret.
        """
        claims = decode_access_token(token, self._secret_key)
        if claims is None:
            raise TokenInvalidError("parse token: invalid token")
        return claims
