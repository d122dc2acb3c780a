"""Authentication router for registration, login and logout."""

from fastapi import APIRouter, Response, status

from devconnect.presentation.api.dependencies import (
    ACCESS_TOKEN_COOKIE,
    AuthService,
    DBSession,
    OptionalUserContext,
    SettingsDep,
    commit_session,
)
from devconnect.presentation.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from devconnect.presentation.api.schemas.common import (
    ErrorResponse,
    ValidationErrorResponse,
)
from devconnect.presentation.api.schemas.users import UserResponse
from devconnect_config.settings import Settings

router = APIRouter()


def _set_access_token_cookie(
    response: Response,
    token: str,
    max_age: int,
    settings: Settings,
) -> None:
    """Set the session token as an HttpOnly cookie.

    This cookie is:
    - HttpOnly: Not accessible to JavaScript
    - Secure: Only sent over HTTPS (when api_cookie_secure=True)
    - SameSite: From settings
    - Max-Age: Never longer than the token lifetime
    """
    response.set_cookie(
        key=ACCESS_TOKEN_COOKIE,
        value=token,
        httponly=True,
        secure=settings.api_cookie_secure,
        samesite=settings.api_cookie_samesite,
        max_age=max_age,
        path="/",
        domain=settings.api_cookie_domain,
    )


def _clear_access_token_cookie(response: Response, settings: Settings) -> None:
    """Clear the session token cookie (for logout)."""
    response.delete_cookie(
        key=ACCESS_TOKEN_COOKIE,
        path="/",
        domain=settings.api_cookie_domain,
        secure=settings.api_cookie_secure,
        httponly=True,
        samesite=settings.api_cookie_samesite,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"model": ValidationErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> RegisterResponse:
    """
    Create an account.

    The password is hashed with bcrypt before it is stored. The response
    never contains the hash.
    """
    user = await auth_service.register(
        email=request.email,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
    )
    await commit_session(session)

    return RegisterResponse(user=UserResponse.from_user(user))


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful, session cookie set"},
        400: {"model": ValidationErrorResponse, "description": "Invalid input"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    response: Response,
    auth_service: AuthService,
    settings: SettingsDep,
) -> LoginResponse:
    """
    Authenticate with email and password.

    On success the session token is set as an HttpOnly cookie. Unknown
    email and wrong password produce the same 401 response.
    """
    user, token = await auth_service.login(
        email=request.email,
        password=request.password,
    )

    max_age = int(auth_service.token_ttl.total_seconds())
    _set_access_token_cookie(response, token, max_age, settings)

    return LoginResponse(user=UserResponse.from_user(user), expires_in=max_age)


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Logout user",
    responses={
        204: {"description": "Session cookie cleared"},
    },
)
async def logout(
    response: Response,
    auth_service: AuthService,
    context: OptionalUserContext,
    settings: SettingsDep,
) -> None:
    """
    Clear the session cookie.

    Tokens are stateless, so a copy of the token held elsewhere remains
    valid until it expires.
    """
    auth_service.logout(context)
    _clear_access_token_cookie(response, settings)
