import pytest

from app.core.authorization import AccessFacts, Action, Principal, ResourceType, ensure_allowed, is_allowed
from app.core.enums import UserRole
from app.core.errors import Forbidden

OWNER = AccessFacts(is_owner=True)
MEMBER = AccessFacts(is_member=True)
STRANGER = AccessFacts()


def principal(role: UserRole = UserRole.MEMBER) -> Principal:
    return Principal(id="u-1", role=role)


@pytest.mark.parametrize("action", [Action.READ, Action.UPDATE, Action.DELETE, Action.MANAGE_MEMBERS])
def test_project_owner_has_full_control(action):
    assert is_allowed(principal(), ResourceType.PROJECT, action, OWNER)


def test_project_member_reads_but_cannot_modify():
    p = principal()
    assert is_allowed(p, ResourceType.PROJECT, Action.READ, MEMBER)
    assert not is_allowed(p, ResourceType.PROJECT, Action.UPDATE, MEMBER)
    assert not is_allowed(p, ResourceType.PROJECT, Action.DELETE, MEMBER)
    assert not is_allowed(p, ResourceType.PROJECT, Action.MANAGE_MEMBERS, MEMBER)


def test_stranger_is_denied_project_read():
    assert not is_allowed(principal(), ResourceType.PROJECT, Action.READ, STRANGER)


def test_task_member_may_update_but_not_delete():
    p = principal()
    assert is_allowed(p, ResourceType.TASK, Action.CREATE, MEMBER)
    assert is_allowed(p, ResourceType.TASK, Action.UPDATE, MEMBER)
    assert not is_allowed(p, ResourceType.TASK, Action.DELETE, MEMBER)
    assert is_allowed(p, ResourceType.TASK, Action.DELETE, OWNER)


@pytest.mark.parametrize("resource", [ResourceType.PROJECT, ResourceType.TASK, ResourceType.TEAM])
def test_admin_overrides_ownership(resource):
    admin = principal(UserRole.ADMIN)
    for action in (Action.READ, Action.UPDATE, Action.DELETE):
        assert is_allowed(admin, resource, action, STRANGER)


def test_manager_role_grants_nothing_extra():
    manager = principal(UserRole.MANAGER)
    assert not is_allowed(manager, ResourceType.PROJECT, Action.READ, STRANGER)
    assert not is_allowed(manager, ResourceType.TEAM, Action.UPDATE, MEMBER)


@pytest.mark.parametrize("action", [Action.READ, Action.UPDATE, Action.DELETE])
def test_admin_has_no_notification_override(action):
    admin = principal(UserRole.ADMIN)
    assert not is_allowed(admin, ResourceType.NOTIFICATION, action, STRANGER)
    assert is_allowed(admin, ResourceType.NOTIFICATION, action, OWNER)


def test_team_lead_governs_and_members_read():
    p = principal()
    assert is_allowed(p, ResourceType.TEAM, Action.MANAGE_MEMBERS, OWNER)
    assert is_allowed(p, ResourceType.TEAM, Action.READ, MEMBER)
    assert not is_allowed(p, ResourceType.TEAM, Action.UPDATE, MEMBER)
    assert not is_allowed(p, ResourceType.TEAM, Action.DELETE, MEMBER)


@pytest.mark.parametrize("action", [Action.CREATE, Action.READ, Action.UPDATE, Action.DELETE])
def test_tags_open_to_any_authenticated_user(action):
    assert is_allowed(principal(), ResourceType.TAG, action, STRANGER)


def test_time_logs_belong_to_their_author():
    assert is_allowed(principal(), ResourceType.TIME_LOG, Action.UPDATE, OWNER)
    assert not is_allowed(principal(), ResourceType.TIME_LOG, Action.UPDATE, MEMBER)
    assert is_allowed(principal(UserRole.ADMIN), ResourceType.TIME_LOG, Action.DELETE, STRANGER)


def test_users_read_only_their_own_time_history():
    assert is_allowed(principal(), ResourceType.USER, Action.READ_TIME_LOGS, OWNER)
    assert not is_allowed(principal(), ResourceType.USER, Action.READ_TIME_LOGS, STRANGER)
    assert is_allowed(principal(UserRole.ADMIN), ResourceType.USER, Action.READ_TIME_LOGS, STRANGER)


@pytest.mark.parametrize("role", [UserRole.MEMBER, UserRole.MANAGER])
def test_only_admins_manage_roles(role):
    assert not is_allowed(principal(role), ResourceType.USER, Action.MANAGE_ROLES, OWNER)
    assert is_allowed(principal(UserRole.ADMIN), ResourceType.USER, Action.MANAGE_ROLES, STRANGER)


def test_actions_without_a_rule_are_denied():
    admin = principal(UserRole.ADMIN)
    assert not is_allowed(admin, ResourceType.NOTIFICATION, Action.MANAGE_MEMBERS, OWNER)
    assert not is_allowed(admin, ResourceType.ATTACHMENT, Action.UPDATE, OWNER)


def test_ensure_allowed_raises_forbidden_with_message():
    with pytest.raises(Forbidden) as exc_info:
        ensure_allowed(principal(), ResourceType.PROJECT, Action.DELETE, MEMBER)
    assert exc_info.value.status_code == 403
    assert exc_info.value.code == "FORBIDDEN"
    assert "delete this project" in exc_info.value.message


def test_ensure_allowed_passes_silently():
    ensure_allowed(principal(), ResourceType.PROJECT, Action.READ, MEMBER)
