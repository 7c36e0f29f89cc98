from fastapi import FastAPI

from automate_api.config.logging_config import configure_logging
from automate_api.infra.routes import (
    auth,
    health
)
from automate_api.utils.provider import get_settings

configure_logging(get_settings().LOG_LEVEL)

app = FastAPI(title="Automate API Auth")

app.include_router(health.router)
app.include_router(auth.router)
