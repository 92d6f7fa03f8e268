"""
FastAPI dependencies shared by the endpoint modules.

Services live on ``app.state`` (see ``main.create_app``) and are
looked up per request, so tests can build an app around their own
stores.  ``parse_body`` accepts the same payload either form‑encoded
or as JSON, since existing clients send both.
"""

from typing import Any, Awaitable, Callable, Dict, Type, TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from ..core.security import get_bearer_token
from ..services.product_service import ProductService
from ..services.user_service import UserService

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


async def require_token(
    token: str = Depends(get_bearer_token),
    users: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    """Dependency guarding protected routes; returns the token claims."""
    return await users.validate_token(token)


def parse_body(model: Type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """Build a dependency decoding the request body into ``model``.

    JSON is used when the ``Content-Type`` says so; anything else is
    read as a form (url‑encoded or multipart).  A missing body, bad
    JSON or a failed field check raises ``RequestValidationError``,
    which the error handlers turn into HTTP 400.
    """

    async def _dependency(request: Request) -> ModelT:
        content_type = request.headers.get("content-type", "")
        try:
            if content_type.startswith("application/json"):
                data = await request.json()
            else:
                data = dict(await request.form())
        except ValueError as exc:
            raise RequestValidationError(
                [{"loc": ("body",), "msg": f"malformed body: {exc}", "type": "value_error"}]
            ) from exc
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise RequestValidationError(exc.errors()) from exc

    return _dependency
