from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from app.db.base import is_valid_id
from app.db.models.permission import Permission
from app.db.models.role import Role


class RoleRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def create(self, role: Role) -> Role:
        self._db.add(role)
        self._db.flush()
        return role

    def get(self, role_id: int) -> Role | None:
        if not is_valid_id(role_id):
            return None
        return self._db.get(Role, role_id)

    def get_by_name(self, name: str, *, guard_name: str) -> Role | None:
        stmt = select(Role).where(Role.name == name, Role.guard_name == guard_name)
        return self._db.execute(stmt).scalars().first()

    def list(self, *, limit: int, offset: int) -> list[Role]:
        stmt: Select = select(Role).order_by(Role.id.asc()).limit(limit).offset(offset)
        return list(self._db.execute(stmt).scalars().all())

    def count(self) -> int:
        return self._db.scalar(select(func.count()).select_from(Role)) or 0

    def delete(self, role: Role) -> None:
        self._db.delete(role)
        self._db.flush()

    def give_permission_to(self, role: Role, permission: Permission) -> bool:
        if permission in role.permissions:
            return False
        role.permissions.append(permission)
        self._db.flush()
        return True

    def revoke_permission_to(self, role: Role, permission: Permission) -> bool:
        if permission not in role.permissions:
            return False
        role.permissions.remove(permission)
        self._db.flush()
        return True
