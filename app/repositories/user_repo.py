from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from app.db.base import is_valid_id
from app.db.models.permission import Permission
from app.db.models.role import Role
from app.db.models.user import User


class UserRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def create(self, user: User) -> User:
        self._db.add(user)
        self._db.flush()
        return user

    def get(self, user_id: int) -> User | None:
        if not is_valid_id(user_id):
            return None
        return self._db.get(User, user_id)

    def get_by_email(self, email: str) -> User | None:
        return self._db.execute(select(User).where(User.email == email)).scalars().first()

    def list(self, *, limit: int, offset: int) -> list[User]:
        stmt: Select = select(User).order_by(User.id.asc()).limit(limit).offset(offset)
        return list(self._db.execute(stmt).scalars().all())

    def count(self) -> int:
        return self._db.scalar(select(func.count()).select_from(User)) or 0

    def assign_role(self, user: User, role: Role) -> bool:
        if role in user.roles:
            return False
        user.roles.append(role)
        self._db.flush()
        return True

    def remove_role(self, user: User, role: Role) -> bool:
        if role not in user.roles:
            return False
        user.roles.remove(role)
        self._db.flush()
        return True

    def give_permission_to(self, user: User, permission: Permission) -> bool:
        if permission in user.permissions:
            return False
        user.permissions.append(permission)
        self._db.flush()
        return True

    def revoke_permission_to(self, user: User, permission: Permission) -> bool:
        if permission not in user.permissions:
            return False
        user.permissions.remove(permission)
        self._db.flush()
        return True
