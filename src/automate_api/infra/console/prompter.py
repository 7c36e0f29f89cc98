import getpass

from typing import Protocol

from automate_api.domain.models.credential import Credential


class Prompter(Protocol):
    """Source of interactive input for the authenticator."""

    def server(self) -> str: ...

    def credential(self) -> Credential: ...

    def two_factor_code(self) -> str: ...

    def notify(self, message: str) -> None: ...


class ConsolePrompter:
    def server(self) -> str:
        return input("Server address: ")

    def credential(self) -> Credential:
        while True:
            username = input("Username: ").strip()

            if username:
                break

        password = getpass.getpass("Password: ")

        return Credential(username=username, password=password)

    def two_factor_code(self) -> str:
        return input("Two-factor code: ")

    def notify(self, message: str) -> None:
        print(message)
