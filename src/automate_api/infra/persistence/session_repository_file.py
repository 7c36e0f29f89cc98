import json
import logging
import threading

from pathlib import Path
from pydantic import ValidationError

from automate_api.domain.models.session import Session
from automate_api.domain.repository.session_repository import SessionRepository

LOGGER = logging.getLogger(__name__)


class FileSessionRepository(SessionRepository):
    def __init__(self, path: str):
        self.path = Path(path)
        self.__lock = threading.Lock()

        super().__init__()

    def load(self) -> Session | None:
        with self.__lock:
            if not self.path.exists():
                return None

            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))

                return Session(**data)
            except (OSError, ValueError, TypeError, ValidationError) as e:
                LOGGER.warning("Ignoring unreadable session file %s: %s", self.path, e)

                return None

    def save(self, session: Session) -> None:
        with self.__lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(mode=0o600, exist_ok=True)
            self.path.chmod(0o600)
            self.path.write_text(
                json.dumps(session.model_dump(mode="json"), ensure_ascii=False, indent=2),
                encoding="utf-8"
            )
