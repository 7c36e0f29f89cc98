from pathlib import Path
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict
)
from typing import Annotated

ROOT = Path(__file__).resolve().parents[3]
ENV_PATH = ROOT / ".env"


class Settings(BaseSettings):
    CWA_SERVER        : str = ""

    CWA_API_PATH      : str = "/cwa/api"
    CWA_TOKEN_PATH    : str = "/v1/apitoken"
    CWA_REFRESH_SUFFIX: str = "/refresh"

    CWA_HTTP_TIMEOUT  : float = 20.0
    CWA_VERIFY_TLS    : bool  = True

    CWA_AUTH_MAX_ATTEMPTS: Annotated[int, Field(ge=1)] = 3

    CWA_SESSION_PATH: str | None = None

    SERVICE_NAME: str = "automate-api"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )
