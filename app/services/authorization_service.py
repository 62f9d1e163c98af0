import logging

from sqlalchemy.orm import Session

from app.db.models.permission import Permission
from app.db.models.role import Role
from app.db.models.user import User
from app.repositories.permission_repo import PermissionRepository
from app.repositories.role_repo import RoleRepository
from app.repositories.user_repo import UserRepository
from app.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


class AuthorizationService:
    """Grants and revokes roles and permissions.

    Every referenced id must exist; unknown ids are reported together as a
    single ``ValidationError`` keyed by request field. Granting something
    already held and revoking something not held are both no-ops.
    """

    def __init__(self, db: Session) -> None:
        self._db = db
        self._users = UserRepository(db)
        self._roles = RoleRepository(db)
        self._permissions = PermissionRepository(db)

    def assign_role_to_user(self, *, user_id: int, role_id: int) -> User:
        user, role = self._resolve(user_id=user_id, role_id=role_id)
        changed = self._users.assign_role(user, role)
        return self._commit_user(user, f"Role assigned. user_id={user_id} role_id={role_id} changed={changed}")

    def revoke_role_from_user(self, *, user_id: int, role_id: int) -> None:
        user, role = self._resolve(user_id=user_id, role_id=role_id)
        changed = self._users.remove_role(user, role)
        self._db.commit()
        logger.info(f"Role revoked. user_id={user_id} role_id={role_id} changed={changed}")

    def assign_permission_to_user(self, *, user_id: int, permission_id: int) -> User:
        user, permission = self._resolve(user_id=user_id, permission_id=permission_id)
        changed = self._users.give_permission_to(user, permission)
        return self._commit_user(
            user, f"Permission given. user_id={user_id} permission_id={permission_id} changed={changed}"
        )

    def revoke_permission_from_user(self, *, user_id: int, permission_id: int) -> None:
        user, permission = self._resolve(user_id=user_id, permission_id=permission_id)
        changed = self._users.revoke_permission_to(user, permission)
        self._db.commit()
        logger.info(f"Permission revoked. user_id={user_id} permission_id={permission_id} changed={changed}")

    def attach_permission_to_role(self, *, role_id: int, permission_id: int) -> Role:
        role, permission = self._resolve(role_id=role_id, permission_id=permission_id)
        changed = self._roles.give_permission_to(role, permission)
        self._db.commit()
        self._db.refresh(role)
        logger.info(f"Permission attached. role_id={role_id} permission_id={permission_id} changed={changed}")
        return role

    def revoke_permission_from_role(self, *, role_id: int, permission_id: int) -> None:
        role, permission = self._resolve(role_id=role_id, permission_id=permission_id)
        changed = self._roles.revoke_permission_to(role, permission)
        self._db.commit()
        logger.info(f"Permission detached. role_id={role_id} permission_id={permission_id} changed={changed}")

    def _commit_user(self, user: User, message: str) -> User:
        self._db.commit()
        self._db.refresh(user)
        logger.info(message)
        return user

    def _resolve(
        self,
        *,
        user_id: int | None = None,
        role_id: int | None = None,
        permission_id: int | None = None,
    ) -> tuple[User | Role | Permission, ...]:
        lookups = (
            ("user_id", user_id, self._users.get),
            ("role_id", role_id, self._roles.get),
            ("permission_id", permission_id, self._permissions.get),
        )
        found = []
        errors: dict[str, list[str]] = {}
        for field, key, getter in lookups:
            if key is None:
                continue
            obj = getter(key)
            if obj is None:
                errors[field] = [f"The selected {field.replace('_', ' ')} is invalid."]
            found.append(obj)

        if errors:
            raise ValidationError("The given data was invalid.", errors)
        return tuple(found)
