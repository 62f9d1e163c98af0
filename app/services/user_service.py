import logging

from sqlalchemy.orm import Session

from app.db.models.user import User
from app.repositories.user_repo import UserRepository
from app.utils.exceptions import NotFoundError, ValidationError
from app.utils.pagination import Page

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session) -> None:
        self._db = db
        self._repo = UserRepository(db)

    def list_users(self, page: Page) -> tuple[list[User], int]:
        return self._repo.list(limit=page.limit, offset=page.offset), self._repo.count()

    def get_user(self, user_id: int) -> User:
        user = self._repo.get(user_id)
        if user is None:
            raise NotFoundError(f"User user_id={user_id} not found.")
        return user

    def create_user(self, *, first_name: str, last_name: str, email: str) -> User:
        self._ensure_email_free(email)
        user = self._repo.create(User(first_name=first_name, last_name=last_name, email=email))
        self._db.commit()
        self._db.refresh(user)
        logger.info(f"User created. user_id={user.id}")
        return user

    def update_user(
        self,
        user_id: int,
        *,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
    ) -> User:
        user = self.get_user(user_id)
        if email is not None and email != user.email:
            self._ensure_email_free(email)
            user.email = email
        if first_name is not None:
            user.first_name = first_name
        if last_name is not None:
            user.last_name = last_name

        self._db.commit()
        self._db.refresh(user)
        logger.info(f"User updated. user_id={user.id}")
        return user

    def _ensure_email_free(self, email: str) -> None:
        if self._repo.get_by_email(email) is not None:
            raise ValidationError.for_field("email", "The email has already been taken.")
