from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_page, list_envelope
from app.db.session import get_db
from app.schemas.auth import UserCreate, UserRead, UserUpdate
from app.schemas.common import ItemEnvelope, ListEnvelope
from app.services.user_service import UserService
from app.utils.pagination import Page

router = APIRouter(prefix="/auth/users", tags=["users"])


def get_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


@router.get("", response_model=ListEnvelope[UserRead])
def list_users(page: Page = Depends(get_page), svc: UserService = Depends(get_service)) -> dict:
    items, total = svc.list_users(page)
    return list_envelope([UserRead.model_validate(x) for x in items], page=page, total=total)


@router.get("/{user_id}", response_model=ItemEnvelope[UserRead])
def get_user(user_id: int, svc: UserService = Depends(get_service)) -> dict:
    return {"data": UserRead.model_validate(svc.get_user(user_id))}


@router.post("", response_model=ItemEnvelope[UserRead], status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, svc: UserService = Depends(get_service)) -> dict:
    user = svc.create_user(first_name=payload.first_name, last_name=payload.last_name, email=payload.email)
    return {"data": UserRead.model_validate(user)}


@router.put("/{user_id}", response_model=ItemEnvelope[UserRead])
def update_user(user_id: int, payload: UserUpdate, svc: UserService = Depends(get_service)) -> dict:
    user = svc.update_user(user_id, **payload.model_dump(exclude_unset=True))
    return {"data": UserRead.model_validate(user)}
