from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_page, list_envelope
from app.db.session import get_db
from app.schemas.auth import PermissionRead
from app.schemas.common import ItemEnvelope, ListEnvelope
from app.services.permission_service import PermissionService
from app.utils.pagination import Page

router = APIRouter(prefix="/auth/permissions", tags=["permissions"])


def get_service(db: Session = Depends(get_db)) -> PermissionService:
    return PermissionService(db)


@router.get("", response_model=ListEnvelope[PermissionRead])
def list_permissions(page: Page = Depends(get_page), svc: PermissionService = Depends(get_service)) -> dict:
    items, total = svc.list_permissions(page)
    return list_envelope([PermissionRead.model_validate(x) for x in items], page=page, total=total)


@router.get("/{permission_id}", response_model=ItemEnvelope[PermissionRead])
def get_permission(permission_id: int, svc: PermissionService = Depends(get_service)) -> dict:
    return {"data": PermissionRead.model_validate(svc.get_permission(permission_id))}
