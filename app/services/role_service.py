import logging

from sqlalchemy.orm import Session

from app.core.enums import DefaultRole
from app.db.models.role import Role
from app.repositories.role_repo import RoleRepository
from app.utils.exceptions import ForbiddenError, NotFoundError, ValidationError
from app.utils.pagination import Page

logger = logging.getLogger(__name__)

DEFAULT_ROLE_NAMES = frozenset(r.value for r in DefaultRole)


class RoleService:
    def __init__(self, db: Session, *, guard_name: str = "api") -> None:
        self._db = db
        self._guard = guard_name
        self._repo = RoleRepository(db)

    def list_roles(self, page: Page) -> tuple[list[Role], int]:
        return self._repo.list(limit=page.limit, offset=page.offset), self._repo.count()

    def get_role(self, role_id: int) -> Role:
        role = self._repo.get(role_id)
        if role is None:
            raise NotFoundError(f"Role role_id={role_id} not found.")
        return role

    def create_role(self, *, name: str) -> Role:
        self._ensure_unique(name)
        role = self._repo.create(Role(name=name, guard_name=self._guard))
        self._db.commit()
        self._db.refresh(role)
        logger.info(f"Role created. role_id={role.id} name={role.name!r}")
        return role

    def update_role(self, role_id: int, *, name: str) -> Role:
        role = self.get_role(role_id)
        self._ensure_not_default(role)
        if name != role.name:
            self._ensure_unique(name)
        role.name = name
        self._db.commit()
        self._db.refresh(role)
        logger.info(f"Role updated. role_id={role.id} name={role.name!r}")
        return role

    def delete_role(self, role_id: int) -> None:
        role = self.get_role(role_id)
        self._ensure_not_default(role)
        self._repo.delete(role)
        self._db.commit()
        logger.info(f"Role deleted. role_id={role_id}")

    def _ensure_unique(self, name: str) -> None:
        if self._repo.get_by_name(name, guard_name=self._guard) is not None:
            raise ValidationError.for_field(
                "name", f"A role `{name}` already exists for guard `{self._guard}`."
            )

    @staticmethod
    def _ensure_not_default(role: Role) -> None:
        if role.name in DEFAULT_ROLE_NAMES:
            raise ForbiddenError("You cannot update/delete default role.")
