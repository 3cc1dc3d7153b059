"""
Authorization checks over the static RBAC tables.

All functions here are pure: no I/O, no shared mutable state, no caching.
They accept enum members or their string values. Anything outside the
closed role/action/language sets raises InvalidRBACValueError instead of
being treated as a denial, so integration bugs never look like a 403.
"""

import logging
from typing import Iterable, List, Type, TypeVar

from .models import Language, PermissionAction, UserRole
from .policy import (
    EDUCATIONAL_ROLES,
    INVITABLE_ROLES,
    LANGUAGE_DISPLAY_NAMES,
    LANGUAGE_FLAGS,
    LANGUAGE_PERMISSIONS,
    PERMISSIONS,
    ROLE_ASSIGNERS,
    ROLE_BADGE_COLORS,
    ROLE_DISPLAY_NAMES,
    ROLE_HIERARCHY,
    SUPER_ADMIN_ONLY_ROLES,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", UserRole, Language, PermissionAction)


class InvalidRBACValueError(ValueError):
    """Raised when a role, action or language is outside its closed set."""


def _coerce(enum_cls: Type[E], value, kind: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidRBACValueError(f"Unknown {kind}: {value!r}") from None


def to_role(value) -> UserRole:
    """Coerce a value to a UserRole or raise InvalidRBACValueError."""
    return _coerce(UserRole, value, "role")


def to_action(value) -> PermissionAction:
    """Coerce a value to a PermissionAction or raise InvalidRBACValueError."""
    return _coerce(PermissionAction, value, "permission action")


def to_language(value) -> Language:
    """Coerce a value to a Language or raise InvalidRBACValueError."""
    return _coerce(Language, value, "language")


# =============================================================================
# Permission matrix
# =============================================================================


def has_permission(role, action) -> bool:
    """Check whether a role may perform an action."""
    return to_action(action) in PERMISSIONS[to_role(role)]


def get_role_permissions(role) -> List[PermissionAction]:
    """Actions granted to a role, in declaration order."""
    granted = PERMISSIONS[to_role(role)]
    return [action for action in PermissionAction if action in granted]


# =============================================================================
# Role hierarchy
# =============================================================================


def has_role_level(role, required_role) -> bool:
    """Check whether a role is at least as senior as required_role."""
    return ROLE_HIERARCHY[to_role(role)] >= ROLE_HIERARCHY[to_role(required_role)]


def can_manage_user(manager_role, target_role) -> bool:
    """
    Check whether manager_role may act upon a user holding target_role.

    Strictly senior only: peers (and oneself) cannot be managed.
    """
    return ROLE_HIERARCHY[to_role(manager_role)] > ROLE_HIERARCHY[to_role(target_role)]


def roles_by_rank() -> List[UserRole]:
    """All roles, most senior first."""
    return sorted(UserRole, key=lambda r: ROLE_HIERARCHY[r], reverse=True)


# =============================================================================
# Language scope
# =============================================================================


def can_access_language(role, language) -> bool:
    """Check whether a role may see or edit content in a language."""
    allowed = LANGUAGE_PERMISSIONS[to_role(role)]
    return to_language(language) in allowed or Language.ALL in allowed


def validate_language_access(role, languages: Iterable) -> bool:
    """Check that a role can access every requested language. Empty input passes."""
    role = to_role(role)
    requested = [to_language(lang) for lang in languages]
    return all(can_access_language(role, lang) for lang in requested)


def get_allowed_languages(role) -> List[Language]:
    """Languages in a role's scope, in declaration order."""
    allowed = LANGUAGE_PERMISSIONS[to_role(role)]
    return [lang for lang in Language if lang in allowed]


# =============================================================================
# Invitations
# =============================================================================


def get_invitable_roles(role) -> List[UserRole]:
    """Roles the given role may invite. Static lookup, not derived from rank."""
    return list(INVITABLE_ROLES[to_role(role)])


def can_invite_role(inviter_role, target_role) -> bool:
    """Check whether inviter_role may invite a user as target_role."""
    return to_role(target_role) in INVITABLE_ROLES[to_role(inviter_role)]


# =============================================================================
# Role transitions
# =============================================================================


def validate_role_transition(current_role, new_role, actor_role) -> bool:
    """
    Decide whether actor_role may change a user's role to new_role.

    Only super admins and institution admins assign roles, and only super
    admins may hand out super_admin or institution_admin.
    """
    # current_role is validated but not consulted yet; kept so callers can
    # pass it once rules depend on the starting role (e.g. demotions).
    to_role(current_role)
    new_role = to_role(new_role)
    actor_role = to_role(actor_role)

    if actor_role not in ROLE_ASSIGNERS:
        logger.debug(f"Role transition denied: {actor_role.value} cannot assign roles")
        return False

    if new_role in SUPER_ADMIN_ONLY_ROLES and actor_role != UserRole.SUPER_ADMIN:
        logger.debug(
            f"Role transition denied: {actor_role.value} cannot assign {new_role.value}"
        )
        return False

    return True


# =============================================================================
# Role predicates
# =============================================================================


def is_educational_role(role) -> bool:
    return to_role(role) in EDUCATIONAL_ROLES


def is_teacher(role) -> bool:
    return to_role(role) == UserRole.TEACHER


def is_student(role) -> bool:
    return to_role(role) == UserRole.STUDENT


def is_parent(role) -> bool:
    return to_role(role) == UserRole.PARENT


def is_institution_admin(role) -> bool:
    return to_role(role) == UserRole.INSTITUTION_ADMIN


def is_super_admin(role) -> bool:
    return to_role(role) == UserRole.SUPER_ADMIN


# =============================================================================
# Display helpers
# =============================================================================


def get_role_display_name(role) -> str:
    return ROLE_DISPLAY_NAMES[to_role(role)]


def get_role_badge_color(role) -> str:
    return ROLE_BADGE_COLORS[to_role(role)]


def get_language_display_name(language) -> str:
    return LANGUAGE_DISPLAY_NAMES[to_language(language)]


def get_language_flag(language) -> str:
    return LANGUAGE_FLAGS[to_language(language)]
