from abc import (
    ABC,
    abstractmethod
)

from automate_api.domain.models.session import Session


class SessionRepository(ABC):
    @abstractmethod
    def load(self) -> Session | None: ...

    @abstractmethod
    def save(self, session: Session) -> None: ...

    def get(self) -> Session | None:
        return self.load()

    def set(self, session: Session) -> None:
        self.save(session)
