"""
Admin authentication endpoints
"""

from fastapi import APIRouter, Depends

from app.core.errors import ErrorResponseModel
from app.dependencies.auth import require_admin
from app.dependencies.services import get_auth_service
from app.models.admin import AdminIdentity
from app.schemas.auth import LoginRequest, LoginResponse, VerifyResponse
from app.services.auth import AuthService

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponseModel}, 401: {"model": ErrorResponseModel}},
)
async def login(credentials: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """
    Exchange admin email and password for a bearer token.
    """
    return await service.login(credentials)


@router.get(
    "/verify",
    response_model=VerifyResponse,
    responses={401: {"model": ErrorResponseModel}, 403: {"model": ErrorResponseModel}},
)
async def verify(
    identity: AdminIdentity = Depends(require_admin),
    service: AuthService = Depends(get_auth_service),
):
    """
    Confirm the bearer token and return the admin it belongs to.
    """
    admin = await service.get_admin(identity)
    return VerifyResponse(admin=admin)
