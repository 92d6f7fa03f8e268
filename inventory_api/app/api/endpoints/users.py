"""
User endpoints.

Registration and login are public.  Both accept ``email`` and
``password`` form‑encoded or as JSON.  Login answers with a token to
be sent as ``Authorization: Bearer <token>`` on the product routes.
"""

from fastapi import APIRouter, Depends, Response, status

from ...schemas import ErrorRead
from ...schemas.user import LoginRead, UserCredentials
from ...services.user_service import UserService
from ..deps import get_user_service, parse_body

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={400: {"model": ErrorRead}},
)
async def register_user(
    user: UserCredentials = Depends(parse_body(UserCredentials)),
    users: UserService = Depends(get_user_service),
) -> Response:
    """Зарегистрировать нового пользователя.

    Returns 201 with an empty body, or 400 if the e‑mail is already
    registered.
    """
    await users.create_user(user)
    return Response(status_code=status.HTTP_201_CREATED)


@router.post("/auth/login", response_model=LoginRead, responses={400: {"model": ErrorRead}})
async def login_user(
    user: UserCredentials = Depends(parse_body(UserCredentials)),
    users: UserService = Depends(get_user_service),
) -> LoginRead:
    """Аутентифицировать пользователя и вернуть токен."""
    return await users.login(user)
