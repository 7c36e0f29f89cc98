from datetime import (
    datetime,
    timezone
)

from automate_api.config.settings import Settings


class HealthService:
    def __init__(self, settings: Settings):
        self.__settings = settings

    def get_health(self) -> dict[str, str]:
        return {
            "status": "ok",
            "service": self.__settings.SERVICE_NAME,
            "ts_utc": datetime\
                        .now(timezone.utc)
                        .isoformat(timespec="seconds")
                        .replace("+00:00","Z")
        }

    def get_config(self) -> dict:
        return {
            "server": self.__settings.CWA_SERVER or None,
            "max_attempts": self.__settings.CWA_AUTH_MAX_ATTEMPTS,
            "session_store": "file" if self.__settings.CWA_SESSION_PATH else "memory",
        }
