"""
Static authorization tables.

All tables are process-wide constants built once at import time and exposed
as read-only mappings over frozensets/tuples. There is no API for changing
them at runtime.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from .models import Language, PermissionAction, UserRole

_R = UserRole
_A = PermissionAction
_L = Language


PERMISSIONS: Mapping[UserRole, FrozenSet[PermissionAction]] = MappingProxyType(
    {
        _R.SUPER_ADMIN: frozenset(PermissionAction),
        _R.INSTITUTION_ADMIN: frozenset(
            {
                _A.CREATE_CLASS,
                _A.EDIT_CLASS,
                _A.DELETE_CLASS,
                _A.ENROLL_STUDENT,
                _A.REMOVE_STUDENT,
                _A.ASSIGN_TEACHER,
                _A.VIEW_PROGRESS,
                _A.INVITE_USERS,
                _A.VIEW_ANALYTICS,
            }
        ),
        _R.TEACHER: frozenset(
            {
                _A.CREATE_CLASS,
                _A.EDIT_CLASS,
                _A.ENROLL_STUDENT,
                _A.REMOVE_STUDENT,
                _A.VIEW_PROGRESS,
            }
        ),
        _R.CONTENT_CREATOR: frozenset({_A.EDIT_CONTENT, _A.VIEW_PROGRESS}),
        _R.PARENT: frozenset({_A.VIEW_PROGRESS}),
        _R.STUDENT: frozenset(),
        _R.MEMBER: frozenset(),
    }
)

# Only relative comparisons are meaningful; ranks are never persisted.
ROLE_HIERARCHY: Mapping[UserRole, int] = MappingProxyType(
    {
        _R.SUPER_ADMIN: 10,
        _R.INSTITUTION_ADMIN: 8,
        _R.TEACHER: 6,
        _R.CONTENT_CREATOR: 5,
        _R.PARENT: 4,
        _R.STUDENT: 2,
        _R.MEMBER: 1,
    }
)

_ALL_LANGUAGES = frozenset({_L.FRENCH, _L.GERMAN, _L.SPANISH, _L.ALL})
_EACH_LANGUAGE = frozenset({_L.FRENCH, _L.GERMAN, _L.SPANISH})

LANGUAGE_PERMISSIONS: Mapping[UserRole, FrozenSet[Language]] = MappingProxyType(
    {
        _R.SUPER_ADMIN: _ALL_LANGUAGES,
        _R.INSTITUTION_ADMIN: _ALL_LANGUAGES,
        # Narrowed per teaching assignment
        _R.TEACHER: _EACH_LANGUAGE,
        _R.CONTENT_CREATOR: _ALL_LANGUAGES,
        # Views a child's progress in any language
        _R.PARENT: frozenset({_L.ALL}),
        # Enrolled languages
        _R.STUDENT: _EACH_LANGUAGE,
        # Individual subscription
        _R.MEMBER: _EACH_LANGUAGE,
    }
)

# Independent of ROLE_HIERARCHY. First entry is the default offered in the
# invite form. student -> parent ranks upward and is kept as-is.
INVITABLE_ROLES: Mapping[UserRole, Tuple[UserRole, ...]] = MappingProxyType(
    {
        _R.SUPER_ADMIN: (
            _R.INSTITUTION_ADMIN,
            _R.TEACHER,
            _R.CONTENT_CREATOR,
            _R.PARENT,
            _R.STUDENT,
            _R.MEMBER,
        ),
        _R.INSTITUTION_ADMIN: (_R.TEACHER, _R.STUDENT, _R.PARENT),
        _R.TEACHER: (_R.STUDENT, _R.PARENT),
        _R.CONTENT_CREATOR: (),
        _R.PARENT: (),
        _R.STUDENT: (_R.PARENT,),
        _R.MEMBER: (),
    }
)

# Roles allowed to change another user's role at all.
ROLE_ASSIGNERS: FrozenSet[UserRole] = frozenset({_R.SUPER_ADMIN, _R.INSTITUTION_ADMIN})

# Roles only a super admin may hand out.
SUPER_ADMIN_ONLY_ROLES: FrozenSet[UserRole] = frozenset(
    {_R.SUPER_ADMIN, _R.INSTITUTION_ADMIN}
)

# Actions whose target must be strictly junior to the actor.
USER_MANAGEMENT_ACTIONS: FrozenSet[PermissionAction] = frozenset(
    {_A.ENROLL_STUDENT, _A.REMOVE_STUDENT, _A.ASSIGN_TEACHER}
)

EDUCATIONAL_ROLES: FrozenSet[UserRole] = frozenset(
    {_R.TEACHER, _R.STUDENT, _R.PARENT, _R.INSTITUTION_ADMIN}
)

ROLE_DISPLAY_NAMES: Mapping[UserRole, str] = MappingProxyType(
    {
        _R.SUPER_ADMIN: "Super Administrator",
        _R.INSTITUTION_ADMIN: "Institution Administrator",
        _R.TEACHER: "Teacher",
        _R.STUDENT: "Student",
        _R.PARENT: "Parent",
        _R.CONTENT_CREATOR: "Content Creator",
        _R.MEMBER: "Member",
    }
)

ROLE_BADGE_COLORS: Mapping[UserRole, str] = MappingProxyType(
    {
        _R.SUPER_ADMIN: "bg-purple-100 text-purple-800",
        _R.INSTITUTION_ADMIN: "bg-blue-100 text-blue-800",
        _R.TEACHER: "bg-green-100 text-green-800",
        _R.STUDENT: "bg-yellow-100 text-yellow-800",
        _R.PARENT: "bg-pink-100 text-pink-800",
        _R.CONTENT_CREATOR: "bg-indigo-100 text-indigo-800",
        _R.MEMBER: "bg-gray-100 text-gray-800",
    }
)

LANGUAGE_DISPLAY_NAMES: Mapping[Language, str] = MappingProxyType(
    {
        _L.FRENCH: "French",
        _L.GERMAN: "German",
        _L.SPANISH: "Spanish",
        _L.ALL: "All Languages",
    }
)

LANGUAGE_FLAGS: Mapping[Language, str] = MappingProxyType(
    {
        _L.FRENCH: "\U0001F1EB\U0001F1F7",
        _L.GERMAN: "\U0001F1E9\U0001F1EA",
        _L.SPANISH: "\U0001F1EA\U0001F1F8",
        _L.ALL: "\U0001F30D",
    }
)
