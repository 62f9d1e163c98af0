from fastapi import APIRouter
from app.api.v1.authorizations import router as authorizations_router
from app.api.v1.permissions import router as permissions_router
from app.api.v1.roles import router as roles_router
from app.api.v1.users import router as users_router

router = APIRouter(prefix="/api/v1")
router.include_router(authorizations_router)
router.include_router(roles_router)
router.include_router(permissions_router)
router.include_router(users_router)
