"""Tests for contextual permission evaluation."""

import dataclasses
import itertools

import pytest

from lingoletics.shared.rbac.context import (
    ContextualPermissionEvaluator,
    LanguageScopeRule,
    PermissionRule,
    RolePermissionRule,
    TargetRoleRule,
    check_contextual_permission,
)
from lingoletics.shared.rbac.models import Language, PermissionAction, PermissionContext, UserRole
from lingoletics.shared.rbac.service import InvalidRBACValueError, has_permission

R = UserRole
A = PermissionAction
L = Language


def ctx(role, **kwargs) -> PermissionContext:
    return PermissionContext(user_id=42, role=role, **kwargs)


@pytest.mark.parametrize("role,action", list(itertools.product(UserRole, PermissionAction)))
def test_bare_context_equals_matrix_check(role, action):
    assert check_contextual_permission(ctx(role), action) is has_permission(role, action)


def test_institution_and_class_do_not_change_the_base_decision():
    context = ctx(R.TEACHER, institution_id=3, class_id=7)
    assert check_contextual_permission(context, A.EDIT_CLASS) is True
    assert check_contextual_permission(context, A.DELETE_CLASS) is False


def test_language_outside_scope_denies():
    assert check_contextual_permission(ctx(R.TEACHER, language=L.FRENCH), A.EDIT_CLASS)
    assert not check_contextual_permission(ctx(R.TEACHER, language=L.ALL), A.EDIT_CLASS)
    assert check_contextual_permission(ctx(R.CONTENT_CREATOR, language=L.ALL), A.EDIT_CONTENT)


def test_target_role_applies_to_user_management_actions():
    context = ctx(R.TEACHER, target_user_id=9, target_role=R.STUDENT)
    assert check_contextual_permission(context, A.ENROLL_STUDENT) is True

    peer = ctx(R.TEACHER, target_user_id=9, target_role=R.TEACHER)
    assert check_contextual_permission(peer, A.REMOVE_STUDENT) is False

    senior = ctx(R.INSTITUTION_ADMIN, target_role=R.SUPER_ADMIN)
    assert check_contextual_permission(senior, A.ASSIGN_TEACHER) is False


def test_target_role_ignored_for_other_actions():
    context = ctx(R.TEACHER, target_role=R.SUPER_ADMIN)
    assert check_contextual_permission(context, A.VIEW_PROGRESS) is True


def test_matrix_denial_wins_over_seniority():
    context = ctx(R.CONTENT_CREATOR, target_role=R.STUDENT)
    assert check_contextual_permission(context, A.ENROLL_STUDENT) is False


def test_string_values_are_accepted():
    context = ctx("teacher", language="german", target_role="student")
    assert check_contextual_permission(context, "enroll_student") is True


def test_invalid_context_values_raise():
    with pytest.raises(InvalidRBACValueError):
        check_contextual_permission(ctx("headmaster"), A.VIEW_PROGRESS)
    with pytest.raises(InvalidRBACValueError):
        check_contextual_permission(ctx(R.TEACHER, language="dutch"), A.VIEW_PROGRESS)
    with pytest.raises(InvalidRBACValueError):
        check_contextual_permission(ctx(R.TEACHER, target_role="alien"), A.VIEW_PROGRESS)
    with pytest.raises(InvalidRBACValueError):
        check_contextual_permission(ctx(R.TEACHER), "fly")


def test_invalid_target_role_raises_even_when_rule_would_skip_it():
    # Validation does not depend on which rules happen to look at a field.
    with pytest.raises(InvalidRBACValueError):
        check_contextual_permission(ctx(R.TEACHER, target_role="alien"), A.EDIT_CLASS)


def test_context_is_immutable():
    context = ctx(R.TEACHER)
    with pytest.raises(dataclasses.FrozenInstanceError):
        context.role = R.SUPER_ADMIN


def test_repeated_checks_agree():
    context = ctx(R.PARENT, language=L.SPANISH)
    results = {check_contextual_permission(context, A.VIEW_PROGRESS) for _ in range(5)}
    assert results == {True}


class SameInstitutionRule(PermissionRule):
    name = "same_institution"

    def __init__(self, institution_id: int):
        self.institution_id = institution_id

    def evaluate(self, context, action):
        return context.institution_id == self.institution_id


def test_evaluator_can_be_extended_with_rules():
    evaluator = ContextualPermissionEvaluator().with_rules(SameInstitutionRule(5))

    assert evaluator.check(ctx(R.TEACHER, institution_id=5), A.CREATE_CLASS) is True
    assert evaluator.check(ctx(R.TEACHER, institution_id=6), A.CREATE_CLASS) is False
    # Base rules still run first
    assert evaluator.check(ctx(R.STUDENT, institution_id=5), A.CREATE_CLASS) is False


def test_with_rules_leaves_original_untouched():
    base = ContextualPermissionEvaluator()
    extended = base.with_rules(SameInstitutionRule(1))
    assert len(extended.rules) == len(base.rules) + 1
    assert base.check(ctx(R.TEACHER, institution_id=2), A.CREATE_CLASS) is True


def test_custom_rule_set():
    matrix_only = ContextualPermissionEvaluator([RolePermissionRule()])
    assert matrix_only.check(ctx(R.TEACHER, language=L.ALL), A.EDIT_CLASS) is True

    assert isinstance(ContextualPermissionEvaluator().rules[1], LanguageScopeRule)


def test_target_rule_with_custom_actions():
    rule = TargetRoleRule(actions=["view_progress"])
    assert rule.evaluate(ctx(R.PARENT, target_role=R.STUDENT), A.VIEW_PROGRESS) is True
    assert rule.evaluate(ctx(R.PARENT, target_role=R.TEACHER), A.VIEW_PROGRESS) is False
    assert rule.evaluate(ctx(R.PARENT, target_role=R.TEACHER), A.ENROLL_STUDENT) is True
