from functools import lru_cache

from automate_api.application.services.auth_service import AuthService
from automate_api.application.services.health_service import HealthService
from automate_api.config.settings import Settings
from automate_api.domain.models.session import Session
from automate_api.domain.repository.session_repository import SessionRepository
from automate_api.infra.client.automate_client import AutomateClient
from automate_api.infra.console.prompter import ConsolePrompter
from automate_api.infra.persistence.session_repository_file import FileSessionRepository
from automate_api.infra.persistence.session_repository_memory import MemorySessionRepository


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


@lru_cache(maxsize=1)
def get_repository() -> SessionRepository:
    settings = get_settings()

    if settings.CWA_SESSION_PATH:
        return FileSessionRepository(settings.CWA_SESSION_PATH)

    return MemorySessionRepository()


@lru_cache(maxsize=1)
def get_client() -> AutomateClient:
    return AutomateClient(get_settings())


@lru_cache(maxsize=1)
def get_auth_service() -> AuthService:
    return AuthService(get_client(), get_repository(), ConsolePrompter(), get_settings())


def get_health_service() -> HealthService:
    return HealthService(get_settings())


def get_session() -> Session:
    """Live session for the current process; raises NotAuthenticatedError otherwise."""
    return get_auth_service().require_session()
