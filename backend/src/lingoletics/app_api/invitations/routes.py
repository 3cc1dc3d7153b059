"""API routes for checking invitations before they are sent."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from lingoletics.shared.auth import User
from lingoletics.shared.errors import ErrorCode, forbidden
from lingoletics.shared.rbac import PermissionAction, UserRole, can_invite_role, get_invitable_roles
from lingoletics.shared.rbac.dependencies import require_permission
from lingoletics.shared.rbac.service import get_role_display_name

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invitations", tags=["invitations"])


class InvitationRequest(BaseModel):
    """Role the inviter wants to hand out."""

    role: UserRole


class InvitationResponse(BaseModel):
    """An invitation that passed authorization."""

    role: UserRole
    display_name: str = Field(..., alias="displayName")

    model_config = {"populate_by_name": True}


@router.post("/validate", response_model=InvitationResponse)
async def validate_invitation(
    body: InvitationRequest,
    user: User = Depends(require_permission(PermissionAction.INVITE_USERS)),
):
    """
    Authorize an invitation for the requested role.

    Requires the invite_users permission, then the role must be in the
    inviter's invitable roles.

    Raises:
        HTTPException: 403 if the inviter may not hand out this role
    """
    if not can_invite_role(user.role, body.role):
        invitable = get_invitable_roles(user.role)
        logger.warning(
            f"User {user.email} ({user.role.value}) cannot invite role {body.role.value}"
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=forbidden(
                ErrorCode.ROLE_NOT_INVITABLE,
                f'You cannot invite users with the role "{body.role.value}". '
                f"You can only invite: {', '.join(r.value for r in invitable)}",
                metadata={"invitableRoles": [r.value for r in invitable]},
            ),
        )

    logger.info(f"User {user.email} authorized to invite a {body.role.value}")
    return InvitationResponse(role=body.role, display_name=get_role_display_name(body.role))
