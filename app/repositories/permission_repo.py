from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from app.db.base import is_valid_id
from app.db.models.permission import Permission


class PermissionRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def create(self, permission: Permission) -> Permission:
        self._db.add(permission)
        self._db.flush()
        return permission

    def get(self, permission_id: int) -> Permission | None:
        if not is_valid_id(permission_id):
            return None
        return self._db.get(Permission, permission_id)

    def get_by_name(self, name: str, *, guard_name: str) -> Permission | None:
        stmt = select(Permission).where(Permission.name == name, Permission.guard_name == guard_name)
        return self._db.execute(stmt).scalars().first()

    def list(self, *, limit: int, offset: int) -> list[Permission]:
        stmt: Select = select(Permission).order_by(Permission.id.asc()).limit(limit).offset(offset)
        return list(self._db.execute(stmt).scalars().all())

    def count(self) -> int:
        return self._db.scalar(select(func.count()).select_from(Permission)) or 0
