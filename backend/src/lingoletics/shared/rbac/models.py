"""Role, language and permission data models for the RBAC system."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """Platform roles. Closed set, compiled into the program."""

    SUPER_ADMIN = "super_admin"
    INSTITUTION_ADMIN = "institution_admin"
    TEACHER = "teacher"
    STUDENT = "student"
    PARENT = "parent"
    CONTENT_CREATOR = "content_creator"
    MEMBER = "member"


class Language(str, Enum):
    """Content languages. ALL is the wildcard scope."""

    FRENCH = "french"
    GERMAN = "german"
    SPANISH = "spanish"
    ALL = "all"


class PermissionAction(str, Enum):
    """Privileged operations gated by the permission matrix."""

    CREATE_CLASS = "create_class"
    EDIT_CLASS = "edit_class"
    DELETE_CLASS = "delete_class"
    ENROLL_STUDENT = "enroll_student"
    REMOVE_STUDENT = "remove_student"
    ASSIGN_TEACHER = "assign_teacher"
    VIEW_PROGRESS = "view_progress"
    EDIT_CONTENT = "edit_content"
    MANAGE_INSTITUTION = "manage_institution"
    INVITE_USERS = "invite_users"
    VIEW_ANALYTICS = "view_analytics"
    MANAGE_SUBSCRIPTIONS = "manage_subscriptions"


@dataclass(frozen=True)
class PermissionContext:
    """
    Request-scoped bundle of identifiers a contextual check is evaluated against.

    Created by the request handler, passed to the evaluator and discarded.
    """

    user_id: int
    role: UserRole
    institution_id: Optional[int] = None
    class_id: Optional[int] = None
    language: Optional[Language] = None
    target_user_id: Optional[int] = None
    target_role: Optional[UserRole] = None


@dataclass(frozen=True)
class TeacherAssignment:
    """A teacher assigned to teach one language, optionally within an institution."""

    teacher_id: int
    language: Language
    institution_id: Optional[int] = None


@dataclass(frozen=True)
class StudentEnrollment:
    """A student enrolled in a class for one language."""

    student_id: int
    class_id: int
    language: Language


# =============================================================================
# Pydantic Models for API Request/Response
# =============================================================================


class RoleSummaryResponse(BaseModel):
    """Everything the roles UI shows about a single role."""

    role: UserRole
    display_name: str = Field(..., alias="displayName")
    badge_color: str = Field(..., alias="badgeColor")
    rank: int
    permissions: List[PermissionAction]
    languages: List[Language]
    invitable_roles: List[UserRole] = Field(..., alias="invitableRoles")

    model_config = {"populate_by_name": True}


class RoleListResponse(BaseModel):
    """Response model for listing roles."""

    roles: List[RoleSummaryResponse]
    total: int


class InvitableRolesResponse(BaseModel):
    """Roles a given role may invite onto the platform."""

    role: UserRole
    invitable_roles: List[UserRole] = Field(..., alias="invitableRoles")

    model_config = {"populate_by_name": True}


class PermissionCheckRequest(BaseModel):
    """
    Request body for a contextual permission check.

    The acting user and role come from the authenticated user, not the body.
    """

    action: PermissionAction
    institution_id: Optional[int] = Field(None, alias="institutionId")
    class_id: Optional[int] = Field(None, alias="classId")
    language: Optional[Language] = None
    target_user_id: Optional[int] = Field(None, alias="targetUserId")
    target_role: Optional[UserRole] = Field(None, alias="targetRole")

    model_config = {"populate_by_name": True}


class RoleTransitionRequest(BaseModel):
    """Request body for validating a role change made by the current user."""

    current_role: UserRole = Field(..., alias="currentRole")
    new_role: UserRole = Field(..., alias="newRole")

    model_config = {"populate_by_name": True}


class DecisionResponse(BaseModel):
    """Outcome of an authorization check."""

    allowed: bool
