import threading

from automate_api.domain.models.session import Session
from automate_api.domain.repository.session_repository import SessionRepository


class MemorySessionRepository(SessionRepository):
    def __init__(self):
        self.__session: Session | None = None
        self.__lock = threading.Lock()

        super().__init__()

    def load(self) -> Session | None:
        with self.__lock:
            return self.__session

    def save(self, session: Session) -> None:
        with self.__lock:
            self.__session = session
