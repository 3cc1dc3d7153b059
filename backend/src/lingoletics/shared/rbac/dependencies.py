"""FastAPI dependency factories that gate routes on the RBAC model."""

import logging
from typing import Callable

from fastapi import Depends, HTTPException, status

from lingoletics.shared.auth.dependencies import get_current_user
from lingoletics.shared.auth.models import User
from lingoletics.shared.errors import ErrorCode, forbidden

from .service import (
    can_access_language,
    get_role_display_name,
    has_permission,
    has_role_level,
    to_action,
    to_language,
    to_role,
)

logger = logging.getLogger(__name__)


def require_permission(action) -> Callable:
    """
    FastAPI dependency that checks the current user's role grants an action.

    Usage:
        @router.post("/classes")
        async def create_class(
            user: User = Depends(require_permission(PermissionAction.CREATE_CLASS))
        ):
            pass
    """
    action = to_action(action)

    async def checker(user: User = Depends(get_current_user)) -> User:
        if not has_permission(user.role, action):
            logger.warning(
                f"User {user.email} ({user.role.value}) denied permission: {action.value}"
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=forbidden(
                    ErrorCode.PERMISSION_DENIED,
                    f"Permission '{action.value}' required",
                ),
            )
        logger.debug(f"User {user.email} authorized for {action.value}")
        return user

    return checker


def require_role_level(required_role) -> Callable:
    """FastAPI dependency requiring a role at least as senior as required_role."""
    required_role = to_role(required_role)

    async def checker(user: User = Depends(get_current_user)) -> User:
        if not has_role_level(user.role, required_role):
            logger.warning(
                f"User {user.email} ({user.role.value}) below required role "
                f"{required_role.value}"
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=forbidden(
                    ErrorCode.FORBIDDEN,
                    f"{get_role_display_name(required_role)} access required",
                ),
            )
        return user

    return checker


def require_language_access(language) -> Callable:
    """FastAPI dependency requiring the language to be in the user's scope."""
    language = to_language(language)

    async def checker(user: User = Depends(get_current_user)) -> User:
        if not can_access_language(user.role, language):
            logger.warning(
                f"User {user.email} ({user.role.value}) denied language: {language.value}"
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=forbidden(
                    ErrorCode.LANGUAGE_NOT_ALLOWED,
                    f"Access to {language.value} content is not allowed",
                ),
            )
        return user

    return checker
