"""
Context-aware permission evaluation.

A ContextualPermissionEvaluator runs an ordered list of PermissionRule
strategies against a PermissionContext; every rule must approve. New scoping
rules (institution membership, class ownership, ...) are added by composing
another rule, without touching callers of check_contextual_permission.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence

from .models import PermissionAction, PermissionContext
from .policy import USER_MANAGEMENT_ACTIONS
from .service import (
    can_access_language,
    can_manage_user,
    has_permission,
    to_action,
    to_language,
    to_role,
)

logger = logging.getLogger(__name__)


class PermissionRule(ABC):
    """A single refinement applied to a contextual permission check."""

    name: str = "rule"

    @abstractmethod
    def evaluate(self, context: PermissionContext, action: PermissionAction) -> bool:
        """Return True to approve, False to deny."""


class RolePermissionRule(PermissionRule):
    """Base permission matrix check on the acting role."""

    name = "role_permission"

    def evaluate(self, context: PermissionContext, action: PermissionAction) -> bool:
        return has_permission(context.role, action)


class LanguageScopeRule(PermissionRule):
    """When the request targets a language, the role must have it in scope."""

    name = "language_scope"

    def evaluate(self, context: PermissionContext, action: PermissionAction) -> bool:
        if context.language is None:
            return True
        return can_access_language(context.role, context.language)


class TargetRoleRule(PermissionRule):
    """User-management actions require the actor to outrank the target."""

    name = "target_role"

    def __init__(self, actions: Iterable[PermissionAction] = USER_MANAGEMENT_ACTIONS):
        self.actions = frozenset(to_action(a) for a in actions)

    def evaluate(self, context: PermissionContext, action: PermissionAction) -> bool:
        if context.target_role is None or action not in self.actions:
            return True
        return can_manage_user(context.role, context.target_role)


DEFAULT_RULES: Sequence[PermissionRule] = (
    RolePermissionRule(),
    LanguageScopeRule(),
    TargetRoleRule(),
)


class ContextualPermissionEvaluator:
    """
    Evaluate an action against a permission context using composable rules.

    Rules run in order and evaluation stops at the first denial.
    """

    def __init__(self, rules: Optional[Sequence[PermissionRule]] = None):
        self.rules = tuple(DEFAULT_RULES if rules is None else rules)

    def with_rules(self, *extra: PermissionRule) -> "ContextualPermissionEvaluator":
        """Return a new evaluator running extra rules after the current ones."""
        return ContextualPermissionEvaluator(self.rules + tuple(extra))

    def check(self, context: PermissionContext, action) -> bool:
        action = to_action(action)
        _validate_context(context)

        for rule in self.rules:
            if not rule.evaluate(context, action):
                logger.debug(
                    f"Permission {action.value} denied for user {context.user_id} "
                    f"({to_role(context.role).value}) by rule {rule.name}"
                )
                return False
        return True


def _validate_context(context: PermissionContext) -> None:
    to_role(context.role)
    if context.language is not None:
        to_language(context.language)
    if context.target_role is not None:
        to_role(context.target_role)


_default_evaluator = ContextualPermissionEvaluator()


def check_contextual_permission(context: PermissionContext, action) -> bool:
    """
    Check an action against a request context.

    Without a language or target role this is exactly has_permission on
    context.role.
    """
    return _default_evaluator.check(context, action)
