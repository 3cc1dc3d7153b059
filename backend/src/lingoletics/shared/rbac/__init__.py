"""RBAC (Role-Based Access Control) module for the learning platform.

FastAPI route guards live in .dependencies and are imported from there
directly, keeping this package free of web-layer imports.
"""

from .models import (
    UserRole,
    Language,
    PermissionAction,
    PermissionContext,
    TeacherAssignment,
    StudentEnrollment,
)
from .policy import (
    PERMISSIONS,
    ROLE_HIERARCHY,
    LANGUAGE_PERMISSIONS,
    INVITABLE_ROLES,
)
from .service import (
    InvalidRBACValueError,
    has_permission,
    has_role_level,
    can_manage_user,
    can_access_language,
    validate_language_access,
    get_invitable_roles,
    can_invite_role,
    validate_role_transition,
)
from .context import (
    PermissionRule,
    ContextualPermissionEvaluator,
    check_contextual_permission,
)

__all__ = [
    "UserRole",
    "Language",
    "PermissionAction",
    "PermissionContext",
    "TeacherAssignment",
    "StudentEnrollment",
    "PERMISSIONS",
    "ROLE_HIERARCHY",
    "LANGUAGE_PERMISSIONS",
    "INVITABLE_ROLES",
    "InvalidRBACValueError",
    "has_permission",
    "has_role_level",
    "can_manage_user",
    "can_access_language",
    "validate_language_access",
    "get_invitable_roles",
    "can_invite_role",
    "validate_role_transition",
    "PermissionRule",
    "ContextualPermissionEvaluator",
    "check_contextual_permission",
]
