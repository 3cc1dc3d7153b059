"""API routes exposing the role and permission model."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from lingoletics.shared.auth import User, get_current_user
from lingoletics.shared.errors import ErrorCode, create_error_response
from lingoletics.shared.rbac import (
    InvalidRBACValueError,
    PermissionContext,
    ROLE_HIERARCHY,
    UserRole,
    check_contextual_permission,
    get_invitable_roles,
    validate_role_transition,
)
from lingoletics.shared.rbac.models import (
    DecisionResponse,
    InvitableRolesResponse,
    PermissionCheckRequest,
    RoleListResponse,
    RoleSummaryResponse,
    RoleTransitionRequest,
)
from lingoletics.shared.rbac.service import (
    get_allowed_languages,
    get_role_badge_color,
    get_role_display_name,
    get_role_permissions,
    roles_by_rank,
    to_role,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/roles", tags=["roles"])


def build_role_summary(role: UserRole) -> RoleSummaryResponse:
    return RoleSummaryResponse(
        role=role,
        display_name=get_role_display_name(role),
        badge_color=get_role_badge_color(role),
        rank=ROLE_HIERARCHY[role],
        permissions=get_role_permissions(role),
        languages=get_allowed_languages(role),
        invitable_roles=get_invitable_roles(role),
    )


def _resolve_role(role_name: str) -> UserRole:
    try:
        return to_role(role_name)
    except InvalidRBACValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=create_error_response(
                ErrorCode.NOT_FOUND,
                f"Role '{role_name}' not found",
                status_code=404,
            ),
        )


@router.get("", response_model=RoleListResponse)
async def list_roles(user: User = Depends(get_current_user)):
    """
    List all platform roles, most senior first.

    Args:
        user: Authenticated user (injected)

    Returns:
        RoleListResponse with a summary per role
    """
    logger.info(f"User {user.email} listing roles")

    roles = [build_role_summary(role) for role in roles_by_rank()]
    return RoleListResponse(roles=roles, total=len(roles))


@router.get("/me", response_model=RoleSummaryResponse)
async def get_my_role(user: User = Depends(get_current_user)):
    """Summary of the authenticated user's own role."""
    return build_role_summary(user.role)


@router.get("/{role_name}", response_model=RoleSummaryResponse)
async def get_role(role_name: str, user: User = Depends(get_current_user)):
    """
    Get a role summary by name.

    Raises:
        HTTPException: 404 if the role does not exist
    """
    return build_role_summary(_resolve_role(role_name))


@router.get("/{role_name}/invitable", response_model=InvitableRolesResponse)
async def get_role_invitable(role_name: str, user: User = Depends(get_current_user)):
    """Roles the given role may invite."""
    role = _resolve_role(role_name)
    return InvitableRolesResponse(role=role, invitable_roles=get_invitable_roles(role))


@router.post("/check", response_model=DecisionResponse)
async def check_permission(
    body: PermissionCheckRequest,
    user: User = Depends(get_current_user),
):
    """
    Evaluate an action for the authenticated user in a request context.

    Denial is reported as allowed=false, not as an error.

    Args:
        body: Action plus optional institution/class/language/target scope
        user: Authenticated user (injected)

    Returns:
        DecisionResponse
    """
    context = PermissionContext(
        user_id=user.user_id,
        role=user.role,
        institution_id=body.institution_id,
        class_id=body.class_id,
        language=body.language,
        target_user_id=body.target_user_id,
        target_role=body.target_role,
    )
    allowed = check_contextual_permission(context, body.action)

    logger.info(
        f"User {user.email} checked {body.action.value}: "
        f"{'allowed' if allowed else 'denied'}"
    )
    return DecisionResponse(allowed=allowed)


@router.post("/transitions/validate", response_model=DecisionResponse)
async def validate_transition(
    body: RoleTransitionRequest,
    user: User = Depends(get_current_user),
):
    """
    Check whether the authenticated user may change a role from
    current_role to new_role.
    """
    allowed = validate_role_transition(body.current_role, body.new_role, user.role)

    logger.info(
        f"User {user.email} ({user.role.value}) role transition "
        f"{body.current_role.value} -> {body.new_role.value}: "
        f"{'allowed' if allowed else 'denied'}"
    )
    return DecisionResponse(allowed=allowed)
