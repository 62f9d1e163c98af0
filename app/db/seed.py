import logging

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.enums import DefaultRole, PermissionName
from app.db.base import Base
from app.db.models.permission import Permission
from app.db.models.role import Role
from app.db.models.user import User  # noqa: F401  registers users tables
from app.db.session import SessionLocal, engine
from app.repositories.permission_repo import PermissionRepository
from app.repositories.role_repo import RoleRepository

logger = logging.getLogger(__name__)


def seed_defaults(db: Session, *, guard_name: str = "api") -> None:
    """Create the default roles and permissions if they are missing.

    The ``system`` role receives every seeded permission.
    """
    perms = PermissionRepository(db)
    roles = RoleRepository(db)

    permissions: list[Permission] = []
    for name in PermissionName:
        permission = perms.get_by_name(name.value, guard_name=guard_name)
        if permission is None:
            permission = perms.create(Permission(name=name.value, guard_name=guard_name))
            logger.info(f"Permission seeded. name={name.value!r}")
        permissions.append(permission)

    for name in DefaultRole:
        role = roles.get_by_name(name.value, guard_name=guard_name)
        if role is None:
            role = roles.create(Role(name=name.value, guard_name=guard_name))
            logger.info(f"Role seeded. name={name.value!r}")
        if name is DefaultRole.SYSTEM:
            for permission in permissions:
                roles.give_permission_to(role, permission)

    db.commit()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    Base.metadata.create_all(engine)
    db = SessionLocal()
    try:
        seed_defaults(db, guard_name=settings.GUARD_NAME)
    finally:
        db.close()
    logger.info("Seeding finished.")


if __name__ == "__main__":
    main()
