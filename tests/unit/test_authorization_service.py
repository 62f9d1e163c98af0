import pytest

from app.core.enums import PermissionName
from app.db.models.permission import Permission
from app.db.models.role import Role
from app.db.models.user import User
from app.services.authorization_service import AuthorizationService
from app.utils.exceptions import ValidationError


@pytest.fixture
def user(seeded_session):
    u = User(first_name="Ann", last_name="Lee", email="ann@example.com")
    seeded_session.add(u)
    seeded_session.commit()
    return u


@pytest.fixture
def role(seeded_session):
    r = Role(name="editor", guard_name="api")
    seeded_session.add(r)
    seeded_session.commit()
    return r


@pytest.fixture
def permission(seeded_session):
    return seeded_session.query(Permission).filter(Permission.name == PermissionName.ROLE_LIST.value).one()


def test_assign_and_revoke_role(seeded_session, user, role):
    svc = AuthorizationService(seeded_session)
    updated = svc.assign_role_to_user(user_id=user.id, role_id=role.id)
    assert [r.name for r in updated.roles] == ["editor"]

    svc.assign_role_to_user(user_id=user.id, role_id=role.id)
    assert len(seeded_session.get(User, user.id).roles) == 1

    svc.revoke_role_from_user(user_id=user.id, role_id=role.id)
    assert seeded_session.get(User, user.id).roles == []

    svc.revoke_role_from_user(user_id=user.id, role_id=role.id)


def test_give_and_revoke_user_permission(seeded_session, user, permission):
    svc = AuthorizationService(seeded_session)
    updated = svc.assign_permission_to_user(user_id=user.id, permission_id=permission.id)
    assert [p.name for p in updated.permissions] == [PermissionName.ROLE_LIST.value]

    svc.revoke_permission_from_user(user_id=user.id, permission_id=permission.id)
    assert seeded_session.get(User, user.id).permissions == []


def test_attach_and_revoke_role_permission(seeded_session, role, permission):
    svc = AuthorizationService(seeded_session)
    updated = svc.attach_permission_to_role(role_id=role.id, permission_id=permission.id)
    assert [p.id for p in updated.permissions] == [permission.id]

    svc.revoke_permission_from_role(role_id=role.id, permission_id=permission.id)
    assert seeded_session.get(Role, role.id).permissions == []


def test_unknown_ids_are_reported_per_field(seeded_session, user):
    svc = AuthorizationService(seeded_session)
    with pytest.raises(ValidationError) as exc:
        svc.assign_role_to_user(user_id=user.id, role_id=999)
    assert exc.value.errors == {"role_id": ["The selected role id is invalid."]}

    with pytest.raises(ValidationError) as exc:
        svc.assign_permission_to_user(user_id=999, permission_id=999)
    assert set(exc.value.errors) == {"user_id", "permission_id"}


def test_out_of_range_ids_are_not_found(seeded_session, role):
    svc = AuthorizationService(seeded_session)
    with pytest.raises(ValidationError) as exc:
        svc.assign_role_to_user(user_id=10**30, role_id=role.id)
    assert exc.value.errors == {"user_id": ["The selected user id is invalid."]}
