"""Identity domain service.

Resolves a bearer credential to an ``Identity`` and checks capabilities.
Credentials are issued by the external identity provider; this service only
verifies them.
"""

import logfire

from blog.config import AuthSettings
from blog.domain.value import Capability, Identity, Role, UserId
from blog.util.jwt import JWTError, verify_token

from .base import Service


class IdentityService(Service):
    """Domain service for resolving and authorizing callers."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize identity service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def resolve(self, token: str) -> Identity:
        """Verify a token and extract the caller's identity.

        Args:
            token: JWT token string

        Returns:
            Identity with user ID and role

        Raises:
            JWTError: If the token is invalid, expired or carries an unknown role
        """
        with logfire.span("identity_service.resolve"):
            try:
                payload = verify_token(token, self.auth_settings)
                identity = Identity(user_id=UserId(payload.user_id), role=Role(payload.role))
            except ValueError:
                logfire.warn("Token carries an unknown role")
                raise JWTError("Invalid token")
            except JWTError as e:
                logfire.warn("Token verification failed", error=str(e))
                raise

            logfire.info(
                "Identity resolved", user_id=identity.user_id, role=identity.role.value
            )
            return identity

    @staticmethod
    def authorize(identity: Identity, capability: Capability) -> bool:
        """Check a capability for an identity.

        Args:
            identity: Resolved caller
            capability: Required capability

        Returns:
            True if the caller's role grants the capability
        """
        allowed = identity.can(capability)
        if not allowed:
            logfire.warn(
                "Capability denied",
                user_id=identity.user_id,
                role=identity.role.value,
                capability=capability.value,
            )
        return allowed
