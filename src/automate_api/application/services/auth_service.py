import logging

from fastapi import HTTPException
from pydantic import ValidationError

from automate_api.config.settings import Settings
from automate_api.domain.errors import (
    AuthenticationError,
    NotAuthenticatedError,
    ServerRequiredError,
    TransportError
)
from automate_api.domain.models.auth_request import (
    AuthRequest,
    FullAuthRequest,
    RefreshRequest,
    clean_passcode
)
from automate_api.domain.models.credential import Credential
from automate_api.domain.models.login_request import LoginRequest
from automate_api.domain.models.session import Session
from automate_api.domain.models.token_response import TokenResponse
from automate_api.domain.repository.session_repository import SessionRepository
from automate_api.infra.client.automate_client import AutomateClient
from automate_api.infra.console.prompter import Prompter
from automate_api.utils.server import normalize_server

LOGGER = logging.getLogger(__name__)


class AuthService:
    def __init__(self, client: AutomateClient, repository: SessionRepository, prompter: Prompter, settings: Settings):
        self.__client = client
        self.__prompter = prompter
        self.__settings = settings
        self.repository = repository

    def authenticate(
        self,
        server: str | None = None,
        credential: Credential | None = None,
        token: str | None = None,
        two_factor_code: str | None = None,
        quiet: bool = False,
        force: bool = False
    ) -> bool:
        """Obtain or refresh a bearer token and store it as the current session.

        Without ``quiet`` the user is prompted for anything missing and failures
        raise ``ServerRequiredError`` or ``AuthenticationError``. With ``quiet``
        nothing is prompted and every failure returns ``False``.
        """
        server = normalize_server(server or self.__settings.CWA_SERVER)

        if not server and not quiet:
            server = normalize_server(self.__prompter.server())

        if not server:
            if quiet:
                return False

            raise ServerRequiredError()

        code = clean_passcode(two_factor_code)
        two_factor_required = False
        response = TokenResponse()
        attempts = 0

        while True:
            attempts += 1
            can_refresh = bool(token) and not force and not code

            if not quiet and credential is None and (code or not can_refresh):
                credential = self.__prompter.credential()

            if not quiet and two_factor_required and not code:
                code = clean_passcode(self.__prompter.two_factor_code())

            request = self.__build_request(credential, token, code, can_refresh)

            if request is None:
                LOGGER.info("No credential or refreshable token for %s", server)
                break

            response = self.__submit(server, request, credential is not None)

            if isinstance(request, RefreshRequest) and not response.has_token:
                token = None

            if response.is_two_factor_required is not None:
                two_factor_required = response.is_two_factor_required

            if quiet or response.has_token:
                break

            if not two_factor_required and credential is not None:
                break

            if two_factor_required and code:
                break

            if attempts >= self.__settings.CWA_AUTH_MAX_ATTEMPTS:
                LOGGER.warning("Giving up on %s after %d attempts", server, attempts)
                break

        if not response.has_token:
            if quiet:
                return False

            if two_factor_required:
                raise AuthenticationError(f"Unable to authenticate to {server}: two-factor authentication failed.")

            raise AuthenticationError(f"Unable to authenticate to {server}: no access token was returned.")

        session = Session(
            server=server,
            base_uri=self.__client.base_uri(server),
            authorization=f"Bearer {response.access_token}",
            expires_at=response.expiration_date
        )

        self.repository.set(session)

        LOGGER.info("Authenticated to %s, token expires %s", server, session.expires_at)

        if not quiet:
            self.__prompter.notify(f"Token retrieved successfully. Expiration: {session.expires_at}")

        return True

    def __build_request(self, credential: Credential | None, token: str | None, code: str, can_refresh: bool) -> AuthRequest | None:
        if credential is not None:
            return FullAuthRequest(
                username=credential.username,
                password=credential.password,
                two_factor_passcode=code
            )

        if token and can_refresh:
            return RefreshRequest(token=token)

        return None

    def __submit(self, server: str, request: AuthRequest, with_credential: bool) -> TokenResponse:
        try:
            return self.__client.request_token(server, request)
        except TransportError as e:
            if with_credential:
                LOGGER.error("Token request to %s failed: %s", server, e)
            else:
                LOGGER.warning("Token refresh for %s failed: %s", server, e)

            return TokenResponse()

    def current_session(self) -> Session | None:
        return self.repository.get()

    def require_session(self) -> Session:
        session = self.repository.get()

        if session is None:
            raise NotAuthenticatedError()

        if session.is_expired:
            raise NotAuthenticatedError(f"Session for {session.server} expired at {session.expires_at}.")

        return session

    def login(self, request: LoginRequest) -> dict:
        try:
            credential = None

            if request.username and request.password is not None:
                credential = Credential(username=request.username, password=request.password)
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=str(e))

        ok = self.authenticate(
            server=request.server,
            credential=credential,
            token=request.token,
            two_factor_code=request.two_factor_code,
            quiet=True,
            force=request.force
        )

        if not ok:
            raise HTTPException(status_code=401, detail="Authentication failed.")

        return self.status()

    def status(self) -> dict:
        session = self.repository.get()

        if session is None:
            return {
                "logged_in": False,
                "server": None,
                "base_uri": None,
                "expires_at": None,
                "expired": None,
            }

        return {
            "logged_in": session.is_valid,
            "server": session.server,
            "base_uri": session.base_uri,
            "expires_at": session.expires_at,
            "expired": session.is_expired,
        }
