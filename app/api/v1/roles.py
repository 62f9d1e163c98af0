from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_page, list_envelope
from app.core.config import settings
from app.db.session import get_db
from app.schemas.auth import RoleRead, RoleWrite
from app.schemas.common import ItemEnvelope, ListEnvelope
from app.services.role_service import RoleService
from app.utils.pagination import Page

router = APIRouter(prefix="/auth/roles", tags=["roles"])


def get_service(db: Session = Depends(get_db)) -> RoleService:
    return RoleService(db, guard_name=settings.GUARD_NAME)


@router.get("", response_model=ListEnvelope[RoleRead])
def list_roles(page: Page = Depends(get_page), svc: RoleService = Depends(get_service)) -> dict:
    items, total = svc.list_roles(page)
    return list_envelope([RoleRead.model_validate(x) for x in items], page=page, total=total)


@router.get("/{role_id}", response_model=ItemEnvelope[RoleRead])
def get_role(role_id: int, svc: RoleService = Depends(get_service)) -> dict:
    return {"data": RoleRead.model_validate(svc.get_role(role_id))}


@router.post("", response_model=ItemEnvelope[RoleRead], status_code=status.HTTP_201_CREATED)
def create_role(payload: RoleWrite, svc: RoleService = Depends(get_service)) -> dict:
    return {"data": RoleRead.model_validate(svc.create_role(name=payload.name))}


@router.put("/{role_id}", response_model=ItemEnvelope[RoleRead])
def update_role(role_id: int, payload: RoleWrite, svc: RoleService = Depends(get_service)) -> dict:
    return {"data": RoleRead.model_validate(svc.update_role(role_id, name=payload.name))}


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_role(role_id: int, svc: RoleService = Depends(get_service)) -> Response:
    svc.delete_role(role_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
