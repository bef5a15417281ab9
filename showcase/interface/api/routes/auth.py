"""Authentication routes.

Login happens at the external identity provider, which sets the
``auth_token`` cookie. These routes only report and clear it.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response

from showcase.config import Settings
from showcase.domain.service import JWTService
from showcase.interface.api.schema import CamelModel
from showcase.util.jwt import JWTError

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(CamelModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(CamelModel):
    """Response for checking authentication status.

    Returned by /auth/me whether or not the caller is authenticated.
    """

    authenticated: bool
    user_id: str | None = None
    email: str | None = None


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    # Delete cookie with same domain/path as when it was created
    response.delete_cookie(
        key="auth_token",
        domain=settings.auth.cookie_domain,
        path="/",
    )
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without authentication: it returns authenticated=false
    instead of raising an error.

    Examples:
        Authenticated:
        {
            "authenticated": true,
            "userId": "6f1c...",
            "email": "alice@example.com"
        }

        Unauthenticated:
        {
            "authenticated": false,
            "userId": null,
            "email": null
        }
    """
    if not auth_token:
        return AuthStatusResponse(authenticated=False)

    try:
        payload = jwt_service.verify_token(auth_token)
    except JWTError:
        # Invalid or expired token - this is expected behavior, not an error
        return AuthStatusResponse(authenticated=False)

    return AuthStatusResponse(
        authenticated=True, user_id=payload.sub, email=payload.email
    )
