from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.auth import (
    RolePermissionAssignment,
    RoleRead,
    UserPermissionAssignment,
    UserRead,
    UserRoleAssignment,
)
from app.schemas.common import ItemEnvelope
from app.services.authorization_service import AuthorizationService

router = APIRouter(prefix="/auth/authorizations", tags=["authorizations"])


def get_service(db: Session = Depends(get_db)) -> AuthorizationService:
    return AuthorizationService(db)


@router.post("/assign-role-to-user", response_model=ItemEnvelope[UserRead])
def assign_role_to_user(payload: UserRoleAssignment, svc: AuthorizationService = Depends(get_service)) -> dict:
    user = svc.assign_role_to_user(user_id=payload.user_id, role_id=payload.role_id)
    return {"data": UserRead.model_validate(user)}


@router.delete("/revoke-role-from-user", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def revoke_role_from_user(payload: UserRoleAssignment, svc: AuthorizationService = Depends(get_service)) -> Response:
    svc.revoke_role_from_user(user_id=payload.user_id, role_id=payload.role_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/assign-permission-to-user", response_model=ItemEnvelope[UserRead])
def assign_permission_to_user(
    payload: UserPermissionAssignment, svc: AuthorizationService = Depends(get_service)
) -> dict:
    user = svc.assign_permission_to_user(user_id=payload.user_id, permission_id=payload.permission_id)
    return {"data": UserRead.model_validate(user)}


@router.delete("/revoke-permission-from-user", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def revoke_permission_from_user(
    payload: UserPermissionAssignment, svc: AuthorizationService = Depends(get_service)
) -> Response:
    svc.revoke_permission_from_user(user_id=payload.user_id, permission_id=payload.permission_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/attach-permission-to-role", response_model=ItemEnvelope[RoleRead])
def attach_permission_to_role(
    payload: RolePermissionAssignment, svc: AuthorizationService = Depends(get_service)
) -> dict:
    role = svc.attach_permission_to_role(role_id=payload.role_id, permission_id=payload.permission_id)
    return {"data": RoleRead.model_validate(role)}


@router.delete("/revoke-permission-from-role", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def revoke_permission_from_role(
    payload: RolePermissionAssignment, svc: AuthorizationService = Depends(get_service)
) -> Response:
    svc.revoke_permission_from_role(role_id=payload.role_id, permission_id=payload.permission_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
