class AutomateAPIError(Exception):
    """Base class for every error raised by automate_api."""


class ServerRequiredError(AutomateAPIError):
    def __init__(self, message: str = "A server address is required."):
        super().__init__(message)


class AuthenticationError(AutomateAPIError):
    pass


class NotAuthenticatedError(AutomateAPIError):
    def __init__(self, message: str = "No live session; authenticate first."):
        super().__init__(message)


class TransportError(AutomateAPIError):
    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code

        super().__init__(message)
