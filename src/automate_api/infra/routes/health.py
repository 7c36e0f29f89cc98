from fastapi import (
    APIRouter,
    Depends
)

from automate_api.application.services.health_service import HealthService
from automate_api.utils.provider import get_health_service

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health(service: HealthService = Depends(get_health_service)):
    return service.get_health()


@router.get("/config")
def config(service: HealthService = Depends(get_health_service)):
    return service.get_config()
