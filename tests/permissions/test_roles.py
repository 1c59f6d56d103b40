"""Tests for the role hierarchy."""

import itertools

import pytest

from console_rbac.features.permissions.entities.roles import (
    ALL_ROLES,
    ROLE_HIERARCHY,
    Role,
    get_role_level,
    is_role_at_least,
    is_valid_role,
)


ORDERED_ROLES = [Role.VIEWER, Role.MEMBER, Role.ADMIN, Role.OWNER]


class TestRoleHierarchy:
    """Test role ranking and comparison."""

    def test_levels(self):
        assert [get_role_level(r) for r in ORDERED_ROLES] == [0, 1, 2, 3]
        assert ROLE_HIERARCHY["owner"] == 3

    @pytest.mark.parametrize("role", list(Role))
    def test_comparison_is_reflexive(self, role):
        assert is_role_at_least(role.value, role.value) is True

    @pytest.mark.parametrize("lower,higher", list(itertools.combinations(ORDERED_ROLES, 2)))
    def test_comparison_is_ordered(self, lower, higher):
        assert is_role_at_least(lower.value, higher.value) is False
        assert is_role_at_least(higher.value, lower.value) is True

    @pytest.mark.parametrize("role", list(Role))
    def test_absent_role_satisfies_nothing(self, role):
        assert is_role_at_least(None, role.value) is False
        assert is_role_at_least("", role.value) is False

    def test_unknown_role_ranks_below_viewer(self):
        assert get_role_level("superuser") == -1
        assert is_role_at_least("superuser", "viewer") is False

    def test_absent_role_fails_even_against_unknown_requirement(self):
        assert is_role_at_least(None, "superuser") is False

    def test_enum_members_are_accepted(self):
        assert is_role_at_least(Role.ADMIN, Role.MEMBER) is True


class TestRoleValidation:
    """Test role identifier validation."""

    def test_valid_roles(self):
        assert ALL_ROLES == {"owner", "admin", "member", "viewer"}
        assert all(is_valid_role(r) for r in ALL_ROLES)
        assert is_valid_role(Role.OWNER) is True

    @pytest.mark.parametrize("value", ["Owner", "root", "", None, 3])
    def test_invalid_roles(self, value):
        assert is_valid_role(value) is False
