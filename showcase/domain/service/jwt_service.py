"""JWT token domain service."""

from uuid import UUID

import logfire

from showcase.config import AuthSettings
from showcase.domain.value import UserId
from showcase.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service resolving request credentials into a voter identity."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, email: str | None = None) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            email: Optional email claim

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, self.auth_settings, email=email)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid, expired, or its subject is not a UUID
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                UUID(payload.sub)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
            except ValueError:
                logfire.warn("JWT subject is not a UUID")
                raise JWTError("Invalid token subject")
            return payload

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Resolve a token to a user ID without raising.

        Missing, invalid, and expired tokens all mean an anonymous caller.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None otherwise
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

        return UserId(UUID(payload.sub))
