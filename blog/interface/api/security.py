"""Bearer token handling at the API boundary.

Reads are public; every mutation resolves the caller first (401 on failure)
and then checks the capability its role grants (403 on failure).
"""

import logfire
from fastapi import HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from blog.domain.service import IdentityService
from blog.domain.value import Capability, Identity
from blog.util.jwt import JWTError

bearer_scheme = HTTPBearer(auto_error=False)


def require_identity(
    credentials: HTTPAuthorizationCredentials | None,
    identity_service: IdentityService,
    capability: Capability,
) -> Identity:
    """Resolve the caller and check one capability.

    Args:
        credentials: Parsed ``Authorization: Bearer`` header, if any
        identity_service: Identity service from DI
        capability: Capability the operation needs

    Returns:
        The caller's identity

    Raises:
        HTTPException: 401 if the token is missing or invalid, 403 if the
            role lacks the capability
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized to access this route",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        identity = identity_service.resolve(credentials.credentials)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not identity_service.authorize(identity, capability):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"User role {identity.role.value} is not authorized to access this route",
        )

    logfire.debug(
        "Caller authorized", user_id=identity.user_id, capability=capability.value
    )
    return identity
