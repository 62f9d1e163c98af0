from sqlalchemy.orm import Session

from app.db.models.permission import Permission
from app.repositories.permission_repo import PermissionRepository
from app.utils.exceptions import NotFoundError
from app.utils.pagination import Page


class PermissionService:
    def __init__(self, db: Session) -> None:
        self._repo = PermissionRepository(db)

    def list_permissions(self, page: Page) -> tuple[list[Permission], int]:
        return self._repo.list(limit=page.limit, offset=page.offset), self._repo.count()

    def get_permission(self, permission_id: int) -> Permission:
        permission = self._repo.get(permission_id)
        if permission is None:
            raise NotFoundError(f"Permission permission_id={permission_id} not found.")
        return permission
