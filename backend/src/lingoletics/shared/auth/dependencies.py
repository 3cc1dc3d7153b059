"""FastAPI dependencies for authentication."""

import logging
import os
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from lingoletics.shared.rbac.models import UserRole
from lingoletics.shared.rbac.service import to_role

from .validator import get_validator
from .models import User

logger = logging.getLogger(__name__)

# HTTP Bearer token security scheme with auto_error=False to handle missing tokens manually
security = HTTPBearer(auto_error=False)

# Check if authentication is enabled (defaults to true for security)
ENABLE_AUTHENTICATION = os.environ.get('ENABLE_AUTHENTICATION', 'true').lower() == 'true'


def get_anonymous_role() -> UserRole:
    """Role for the anonymous user, from ANONYMOUS_ROLE (default member)."""
    return to_role(os.environ.get('ANONYMOUS_ROLE', 'member'))


# An unknown value fails here, at import, rather than on the first request.
ANONYMOUS_ROLE = get_anonymous_role()


def anonymous_user() -> User:
    """User returned while authentication is disabled."""
    return User(
        email="anonymous@local.dev",
        user_id=0,
        name="Anonymous User",
        role=ANONYMOUS_ROLE,
        picture=None
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> User:
    """
    Resolve the user whose platform role gates this request.

    With ENABLE_AUTHENTICATION=false every request runs as the anonymous
    user holding ANONYMOUS_ROLE.

    Raises:
        HTTPException:
            - 401 if the bearer token is missing or rejected
            - 500 if no TokenValidator is registered
    """
    if not ENABLE_AUTHENTICATION:
        logger.warning("Authentication is DISABLED via ENABLE_AUTHENTICATION=false - returning anonymous user")
        return anonymous_user()

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required. Please provide a valid Bearer token in the Authorization header.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    validator = get_validator()

    if validator is None:
        logger.error("No token validator registered but authentication is enabled")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Authentication service misconfigured."
        )

    try:
        return validator.validate_token(credentials.credentials)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error in authentication: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication failed."
        )
