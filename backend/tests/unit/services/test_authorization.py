"""Tests for the authorization rule table."""

import pytest

from academic_schedule.core.enums import RoleName
from academic_schedule.core.exceptions import PermissionDeniedException
from academic_schedule.services.authorization import (
    Action,
    AuthorizationPolicy,
    CallerContext,
)

PROFESSOR = CallerContext(user_id="prof-1", role=RoleName.PROFESSOR)
COORDINATOR = CallerContext(user_id="coord-1", role=RoleName.COORDINATOR)
DIRECTOR = CallerContext(user_id="dir-1", role=RoleName.DIRECTOR)
ADMIN = CallerContext(user_id="admin-1", role=RoleName.ADMIN)

WRITES = [Action.CREATE_AVAILABILITY, Action.UPDATE_AVAILABILITY, Action.DELETE_AVAILABILITY]
READS = [Action.READ_AVAILABILITY, Action.LIST_AVAILABILITY]


@pytest.fixture
def policy():
    return AuthorizationPolicy()


class TestAvailabilityRules:
    @pytest.mark.parametrize("action", WRITES + READS)
    def test_professor_on_self(self, policy, action):
        assert policy.is_allowed(PROFESSOR, action, "prof-1")

    @pytest.mark.parametrize("action", WRITES + READS)
    def test_professor_on_other_denied(self, policy, action):
        assert not policy.is_allowed(PROFESSOR, action, "prof-2")

    @pytest.mark.parametrize("caller", [DIRECTOR, ADMIN])
    @pytest.mark.parametrize("action", WRITES + READS)
    def test_elevated_roles_on_anyone(self, policy, caller, action):
        assert policy.is_allowed(caller, action, "prof-2")

    @pytest.mark.parametrize("action", READS)
    def test_coordinator_reads(self, policy, action):
        assert policy.is_allowed(COORDINATOR, action, "prof-2")
        assert policy.is_allowed(COORDINATOR, action, None)

    @pytest.mark.parametrize("action", WRITES)
    def test_coordinator_cannot_write(self, policy, action):
        assert not policy.is_allowed(COORDINATOR, action, "prof-2")


class TestShiftConfigurationRules:
    @pytest.mark.parametrize("caller", [PROFESSOR, COORDINATOR, DIRECTOR, ADMIN])
    def test_everyone_reads_configuration_and_slots(self, policy, caller):
        assert policy.is_allowed(caller, Action.READ_SHIFT_CONFIGURATION)
        assert policy.is_allowed(caller, Action.LIST_SLOTS)

    @pytest.mark.parametrize(
        "caller,allowed",
        [(PROFESSOR, False), (COORDINATOR, False), (DIRECTOR, True), (ADMIN, True)],
    )
    def test_only_director_and_admin_manage(self, policy, caller, allowed):
        assert policy.is_allowed(caller, Action.MANAGE_SHIFT_CONFIGURATION) is allowed


class TestRequire:
    def test_denial_raises_with_action(self, policy):
        with pytest.raises(PermissionDeniedException) as exc_info:
            policy.require(COORDINATOR, Action.DELETE_AVAILABILITY, "prof-1")
        assert exc_info.value.details == {"action": "DELETE_AVAILABILITY"}

    def test_allowed_returns_none(self, policy):
        assert policy.require(ADMIN, Action.DELETE_AVAILABILITY, "prof-1") is None

    def test_empty_rule_table_denies_everything(self):
        with pytest.raises(PermissionDeniedException):
            AuthorizationPolicy(rules=frozenset()).require(ADMIN, Action.LIST_SLOTS)


class TestResolveProfessorId:
    def test_professor_forced_to_self(self):
        assert AuthorizationPolicy.resolve_professor_id(PROFESSOR, "prof-2") == "prof-1"
        assert AuthorizationPolicy.resolve_professor_id(PROFESSOR, None) == "prof-1"

    @pytest.mark.parametrize("caller", [COORDINATOR, DIRECTOR, ADMIN])
    def test_others_keep_requested_id(self, caller):
        assert AuthorizationPolicy.resolve_professor_id(caller, "prof-2") == "prof-2"
