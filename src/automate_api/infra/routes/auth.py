from fastapi import (
    APIRouter,
    Depends
)

from automate_api.application.services.auth_service import AuthService
from automate_api.domain.models.login_request import LoginRequest
from automate_api.utils.provider import get_auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login")
def login(request: LoginRequest, service: AuthService = Depends(get_auth_service)):
    return service.login(request)


@router.get("/status")
def auth_status(service: AuthService = Depends(get_auth_service)):
    return service.status()
